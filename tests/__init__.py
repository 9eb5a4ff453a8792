# Photo Library Test Suite
"""
Unit tests exercise services against a real SQLite key/value store and
local object storage in a temporary directory. Integration tests drive
the HTTP API through FastAPI's TestClient.
"""
