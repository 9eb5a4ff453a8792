"""Factory for creating object storage backends."""
import os
from pathlib import Path

from ...config import BASE_DIR
from .base import ObjectStorage, StorageConfig
from .local_storage import LocalStorage


def get_storage_config() -> StorageConfig:
    """Get storage configuration from environment variables.

    Environment variables:
    - STORAGE_BACKEND: 'local' (default), 's3', 'minio'
    - STORAGE_BASE_PATH: Base path for local storage (default: ./objects)

    For S3:
    - S3_BUCKET: Bucket name
    - S3_ENDPOINT: Custom endpoint (for MinIO)
    - S3_ACCESS_KEY: Access key
    - S3_SECRET_KEY: Secret key
    - S3_REGION: Region (default: us-east-1)
    - S3_USE_SSL: Use SSL (default: true)
    """
    backend = os.environ.get("STORAGE_BACKEND", "local").lower()

    if backend == "local":
        base_path = os.environ.get("STORAGE_BASE_PATH")
        return StorageConfig(
            backend="local",
            base_path=Path(base_path) if base_path else BASE_DIR / "objects"
        )

    elif backend in ("s3", "minio"):
        bucket = os.environ.get("S3_BUCKET")
        if not bucket:
            raise ValueError("S3_BUCKET environment variable is required for S3 storage")

        return StorageConfig(
            backend=backend,
            bucket_name=bucket,
            endpoint_url=os.environ.get("S3_ENDPOINT"),
            access_key=os.environ.get("S3_ACCESS_KEY"),
            secret_key=os.environ.get("S3_SECRET_KEY"),
            region=os.environ.get("S3_REGION", "us-east-1"),
            use_ssl=os.environ.get("S3_USE_SSL", "true").lower() == "true"
        )

    else:
        raise ValueError(f"Unknown storage backend: {backend}")


def get_storage_from_config(config: StorageConfig) -> ObjectStorage:
    """Create storage backend from configuration.

    Args:
        config: Storage configuration

    Returns:
        Storage backend instance
    """
    if config.backend == "local":
        return LocalStorage(config)

    elif config.backend in ("s3", "minio"):
        from .s3_storage import S3Storage
        return S3Storage(config)

    else:
        raise ValueError(f"Unknown storage backend: {config.backend}")
