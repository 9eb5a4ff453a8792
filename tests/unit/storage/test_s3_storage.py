"""Unit tests for S3Storage with a mocked boto3 client."""
import asyncio
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from photolib.infrastructure.storage import S3Storage, StorageConfig
from photolib.infrastructure.storage.base import DownloadError, FileNotFoundError as StorageFileNotFound


def _client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def mock_client():
    return Mock()


@pytest.fixture
def s3(mock_client) -> S3Storage:
    config = StorageConfig(backend="s3", bucket_name="photos")
    return S3Storage(config, client=mock_client)


def test_upload_sets_content_type(s3, mock_client):
    key = asyncio.run(s3.upload("thumb_abc", b"bytes", content_type="image/webp"))

    assert key == "thumb_abc"
    mock_client.put_object.assert_called_once_with(
        Bucket="photos", Key="thumb_abc", Body=b"bytes", ContentType="image/webp"
    )


def test_download_returns_metadata(s3, mock_client):
    body = Mock()
    body.read.return_value = b"jpeg"
    mock_client.get_object.return_value = {
        "Body": body,
        "ContentType": "image/jpeg",
        "ContentLength": 4,
        "ETag": '"etag"',
    }

    stored = asyncio.run(s3.download("abc"))

    assert stored.body == b"jpeg"
    assert stored.content_type == "image/jpeg"
    assert stored.size == 4
    assert stored.etag == '"etag"'


def test_download_missing_raises_not_found(s3, mock_client):
    mock_client.get_object.side_effect = _client_error("NoSuchKey")
    with pytest.raises(StorageFileNotFound):
        asyncio.run(s3.download("abc"))


def test_download_other_error(s3, mock_client):
    mock_client.get_object.side_effect = _client_error("AccessDenied")
    with pytest.raises(DownloadError):
        asyncio.run(s3.download("abc"))


def test_delete(s3, mock_client):
    assert asyncio.run(s3.delete("preview_abc")) is True
    mock_client.delete_object.assert_called_once_with(Bucket="photos", Key="preview_abc")


def test_exists(s3, mock_client):
    assert asyncio.run(s3.exists("abc")) is True

    mock_client.head_object.side_effect = _client_error("404", "HeadObject")
    assert asyncio.run(s3.exists("abc")) is False


def test_requires_s3_backend(mock_client):
    with pytest.raises(ValueError):
        S3Storage(StorageConfig(backend="local"), client=mock_client)
