"""Local filesystem object storage."""
import hashlib
import json
from pathlib import Path
from typing import BinaryIO, Optional, Union

import aiofiles

from .base import (
    ObjectStorage,
    StorageConfig,
    StoredObject,
    FileNotFoundError as StorageFileNotFoundError,
    UploadError,
    DownloadError,
    DeleteError
)


class LocalStorage(ObjectStorage):
    """Local filesystem storage backend.

    Stores objects in directory structure:
        base_path/
            objects/
                <key>
            metadata/
                <key>.json     content type, size, etag
    """

    def __init__(self, config: StorageConfig):
        """Initialize local storage.

        Args:
            config: Storage configuration with base_path
        """
        if config.backend != "local":
            raise ValueError(f"LocalStorage requires backend='local', got '{config.backend}'")
        if config.base_path is None:
            raise ValueError("LocalStorage requires base_path")

        self.config = config
        self.base_path = Path(config.base_path)

        for folder in ["objects", "metadata"]:
            (self.base_path / folder).mkdir(parents=True, exist_ok=True)

    def _object_path(self, key: str) -> Path:
        # Sanitize key to prevent directory traversal
        safe_key = Path(key).name
        return self.base_path / "objects" / safe_key

    def _metadata_path(self, key: str) -> Path:
        safe_key = Path(key).name
        return self.base_path / "metadata" / f"{safe_key}.json"

    async def upload(
        self,
        key: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None
    ) -> str:
        """Write object and its metadata sidecar."""
        object_path = self._object_path(key)
        digest = hashlib.md5()
        size = 0

        try:
            async with aiofiles.open(object_path, 'wb') as f:
                if isinstance(content, bytes):
                    digest.update(content)
                    size = len(content)
                    await f.write(content)
                else:
                    while True:
                        chunk = content.read(8192)  # 8KB chunks
                        if not chunk:
                            break
                        digest.update(chunk)
                        size += len(chunk)
                        await f.write(chunk)

            metadata = {
                "content_type": content_type,
                "size": size,
                "etag": f'"{digest.hexdigest()}"',
            }
            async with aiofiles.open(self._metadata_path(key), 'w') as f:
                await f.write(json.dumps(metadata))

            return str(object_path.relative_to(self.base_path))

        except (IOError, OSError) as e:
            raise UploadError(f"Failed to upload {key}: {e}")

    async def download(self, key: str) -> StoredObject:
        """Read object and metadata from the filesystem."""
        object_path = self._object_path(key)

        if not object_path.is_file():
            raise StorageFileNotFoundError(f"Object not found: {key}")

        try:
            async with aiofiles.open(object_path, 'rb') as f:
                body = await f.read()

            metadata = {}
            metadata_path = self._metadata_path(key)
            if metadata_path.exists():
                async with aiofiles.open(metadata_path, 'r') as f:
                    metadata = json.loads(await f.read())
        except (IOError, OSError) as e:
            raise DownloadError(f"Failed to download {key}: {e}")

        return StoredObject(
            key=key,
            body=body,
            content_type=metadata.get("content_type"),
            size=len(body),
            etag=metadata.get("etag") or f'"{hashlib.md5(body).hexdigest()}"',
        )

    async def delete(self, key: str) -> bool:
        """Delete object and its metadata sidecar."""
        object_path = self._object_path(key)
        metadata_path = self._metadata_path(key)

        if not object_path.exists():
            return False

        try:
            object_path.unlink()
            metadata_path.unlink(missing_ok=True)
            return True
        except (IOError, OSError) as e:
            raise DeleteError(f"Failed to delete {key}: {e}")

    async def exists(self, key: str) -> bool:
        return self._object_path(key).is_file()
