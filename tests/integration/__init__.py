# Integration Tests
"""
Integration tests verify complete workflows through the HTTP API.

Principle: Test behavior, not implementation.
"""
