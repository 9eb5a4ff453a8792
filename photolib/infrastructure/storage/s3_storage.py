"""S3-compatible object storage (AWS S3, MinIO, DigitalOcean Spaces)."""
import asyncio
from pathlib import Path
from typing import BinaryIO, Optional, Union

import boto3
from botocore.exceptions import ClientError

from .base import (
    ObjectStorage,
    StorageConfig,
    StorageError,
    StoredObject,
    FileNotFoundError as StorageFileNotFoundError,
    UploadError,
    DownloadError,
    DeleteError
)


def _error_code(error: ClientError) -> str:
    return error.response.get('Error', {}).get('Code', 'Unknown')


class S3Storage(ObjectStorage):
    """S3-compatible storage backend.

    boto3 calls are blocking and run in a worker thread.
    """

    def __init__(self, config: StorageConfig, client=None):
        """Initialize S3 storage.

        Args:
            config: Storage configuration with S3 settings
            client: Pre-built boto3 S3 client (tests)
        """
        if config.backend not in ("s3", "minio"):
            raise ValueError(
                f"S3Storage requires backend='s3' or 'minio', got '{config.backend}'"
            )

        self.config = config
        self.bucket = config.bucket_name

        if client is None:
            client_kwargs = {
                "service_name": "s3",
                "aws_access_key_id": config.access_key,
                "aws_secret_access_key": config.secret_key,
                "region_name": config.region,
            }
            # Custom endpoint for MinIO/DigitalOcean
            if config.endpoint_url:
                client_kwargs["endpoint_url"] = config.endpoint_url
                client_kwargs["use_ssl"] = config.use_ssl
            client = boto3.client(**client_kwargs)

        self.client = client

    def _get_key(self, key: str) -> str:
        return Path(key).name

    async def upload(
        self,
        key: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None
    ) -> str:
        """Upload object to S3."""
        object_key = self._get_key(key)

        extra_args = {}
        if content_type:
            extra_args['ContentType'] = content_type

        body = content if isinstance(content, bytes) else content.read()

        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.bucket,
                Key=object_key,
                Body=body,
                **extra_args
            )
            return object_key
        except ClientError as e:
            raise UploadError(f"Failed to upload {key}: {e}")

    async def download(self, key: str) -> StoredObject:
        """Download object and metadata from S3."""
        object_key = self._get_key(key)

        try:
            response = await asyncio.to_thread(
                self.client.get_object, Bucket=self.bucket, Key=object_key
            )
            body = await asyncio.to_thread(response['Body'].read)
        except ClientError as e:
            if _error_code(e) in ('404', 'NoSuchKey'):
                raise StorageFileNotFoundError(f"Object not found: {key}")
            raise DownloadError(f"Failed to download {key}: {e}")

        return StoredObject(
            key=key,
            body=body,
            content_type=response.get('ContentType'),
            size=response.get('ContentLength', len(body)),
            etag=response.get('ETag', ''),
        )

    async def delete(self, key: str) -> bool:
        """Delete object from S3.

        S3 deletes are idempotent, so a missing key also reports True.
        """
        object_key = self._get_key(key)

        try:
            await asyncio.to_thread(
                self.client.delete_object, Bucket=self.bucket, Key=object_key
            )
            return True
        except ClientError as e:
            if _error_code(e) == 'NoSuchKey':
                return False
            raise DeleteError(f"Failed to delete {key}: {e}")

    async def exists(self, key: str) -> bool:
        """Check if object exists in S3."""
        object_key = self._get_key(key)

        try:
            await asyncio.to_thread(
                self.client.head_object, Bucket=self.bucket, Key=object_key
            )
            return True
        except ClientError as e:
            if _error_code(e) in ('404', 'NoSuchKey'):
                return False
            raise StorageError(f"Failed to check existence of {key}: {e}")
