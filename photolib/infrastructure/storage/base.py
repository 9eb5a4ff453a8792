"""Abstract object storage interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class FileNotFoundError(StorageError):
    """Object not found in storage."""
    pass


class UploadError(StorageError):
    """Failed to upload object."""
    pass


class DownloadError(StorageError):
    """Failed to download object."""
    pass


class DeleteError(StorageError):
    """Failed to delete object."""
    pass


@dataclass
class StorageConfig:
    """Storage configuration."""
    backend: str  # 'local', 's3', 'minio'

    # Local storage settings
    base_path: Optional[Path] = None

    # S3/MinIO settings
    endpoint_url: Optional[str] = None
    bucket_name: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: str = "us-east-1"
    use_ssl: bool = True


@dataclass
class StoredObject:
    """Object body plus the metadata needed to serve it."""
    key: str
    body: bytes
    content_type: Optional[str]
    size: int
    etag: str


class ObjectStorage(ABC):
    """Abstract interface for binary object storage.

    Keys are flat strings such as ``abc``, ``thumb_abc``, ``preview_abc``.

    Implementations:
    - LocalStorage: Filesystem storage
    - S3Storage: AWS S3 / MinIO / DigitalOcean Spaces
    """

    @abstractmethod
    async def upload(
        self,
        key: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None
    ) -> str:
        """Store an object, replacing any previous one under key.

        Args:
            key: Object key
            content: Object content as bytes or file-like object
            content_type: MIME type kept as object metadata

        Returns:
            Storage key/path of the uploaded object

        Raises:
            UploadError: If upload fails
        """
        pass

    @abstractmethod
    async def download(self, key: str) -> StoredObject:
        """Fetch an object with its metadata.

        Raises:
            FileNotFoundError: If the object doesn't exist
            DownloadError: If download fails
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete an object.

        Returns:
            True if deleted, False if it didn't exist

        Raises:
            DeleteError: If deletion fails for other reasons
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if an object exists."""
        pass

    async def delete_batch(self, keys: list[str]) -> list[bool]:
        """Delete several objects, one after another.

        Args:
            keys: Object keys

        Returns:
            List of deletion results
        """
        results = []
        for key in keys:
            result = await self.delete(key)
            results.append(result)
        return results
