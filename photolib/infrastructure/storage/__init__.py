"""Object storage for photo variants.

Supports multiple backends: local filesystem, S3, MinIO.
"""
from .base import (
    ObjectStorage,
    StorageError,
    FileNotFoundError,
    StorageConfig,
    StoredObject,
)
from .local_storage import LocalStorage
from .s3_storage import S3Storage
from .factory import get_storage_config, get_storage_from_config

__all__ = [
    "ObjectStorage",
    "StorageError",
    "FileNotFoundError",
    "StorageConfig",
    "StoredObject",
    "LocalStorage",
    "S3Storage",
    "get_storage_config",
    "get_storage_from_config",
]
