# Infrastructure layer - key/value store, object storage
"""
Infrastructure layer contains:
- Key/value document store (aiosqlite)
- Repositories for User and Library documents
- Object storage adapters for photo variants
"""
