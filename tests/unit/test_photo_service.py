"""Tests for PhotoService: variant upload and delivery."""
import pytest

from photolib.application.services.photo_service import object_key, object_keys
from photolib.errors import NotFoundError, UnauthorizedError, ValidationError


class TestObjectKeys:

    def test_size_mapping(self):
        assert object_key("abc", "original") == "abc"
        assert object_key("abc", "thumbnail") == "thumb_abc"
        assert object_key("abc", "preview") == "preview_abc"

    @pytest.mark.parametrize("size", [None, "", "large", "ORIGINAL"])
    def test_unknown_size(self, size):
        assert object_key("abc", size) is None

    def test_all_keys(self):
        assert object_keys("abc") == ["abc", "thumb_abc", "preview_abc"]


class TestCreatePhoto:

    @pytest.mark.asyncio
    async def test_stores_three_variants(self, library_service, photo_service, admin, storage, photo_parts):
        await library_service.create_library(admin, "L1")

        photo = await photo_service.create_photo(admin, "L1", photo_parts)

        assert len(photo.id) == 16
        assert photo.uploaded_by == "admin"
        assert (await storage.download(photo.id)).body == b"original-bytes"
        assert (await storage.download(f"thumb_{photo.id}")).content_type == "image/webp"
        assert (await storage.download(f"preview_{photo.id}")).body == b"preview-bytes"

    @pytest.mark.asyncio
    async def test_not_added_to_any_album(self, library_service, photo_service, admin, photo_parts):
        await library_service.create_library(admin, "L1")
        await photo_service.create_photo(admin, "L1", photo_parts)

        library = await library_service.library_repo.get("L1")
        assert library.albums == []

    @pytest.mark.asyncio
    async def test_member_view_is_redacted(self, library_service, photo_service, admin, member, photo_parts):
        await library_service.create_library(admin, "L1")
        photo = await photo_service.create_photo(member, "L1", photo_parts)
        assert photo.model_dump(exclude_none=True) == {"id": photo.id}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["original", "thumbnail", "preview"])
    async def test_missing_part_rejected(
        self, library_service, photo_service, admin, storage, photo_parts, missing
    ):
        await library_service.create_library(admin, "L1")
        del photo_parts[missing]

        with pytest.raises(ValidationError):
            await photo_service.create_photo(admin, "L1", photo_parts)

        assert list((storage.base_path / "objects").iterdir()) == []

    @pytest.mark.asyncio
    async def test_text_part_rejected(self, library_service, photo_service, admin, photo_parts):
        await library_service.create_library(admin, "L1")
        photo_parts["preview"] = "just text"

        with pytest.raises(ValidationError):
            await photo_service.create_photo(admin, "L1", photo_parts)

    @pytest.mark.asyncio
    async def test_outsider_rejected(self, library_service, photo_service, admin, outsider, photo_parts):
        await library_service.create_library(admin, "L1")
        with pytest.raises(UnauthorizedError):
            await photo_service.create_photo(outsider, "L1", photo_parts)

    @pytest.mark.asyncio
    async def test_missing_library(self, photo_service, admin, photo_parts):
        with pytest.raises(NotFoundError):
            await photo_service.create_photo(admin, "L1", photo_parts)


class TestFetchPhoto:

    @pytest.mark.asyncio
    async def test_fetch_sets_cache_headers(self, photo_service, storage):
        await storage.upload("P1", b"jpeg!", content_type="image/png")

        download = await photo_service.fetch_photo("P1", "original")

        assert download.body == b"jpeg!"
        assert download.media_type == "image/png"
        assert download.headers["Cache-Control"] == "public, max-age=604800, immutable"
        assert download.headers["Content-Length"] == "5"
        assert download.headers["ETag"].startswith('"')

    @pytest.mark.asyncio
    async def test_default_content_type(self, photo_service, storage):
        await storage.upload("thumb_P1", b"x")
        download = await photo_service.fetch_photo("P1", "thumbnail")
        assert download.media_type == "image/jpeg"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [None, "huge"])
    async def test_bad_size(self, photo_service, size):
        with pytest.raises(ValidationError):
            await photo_service.fetch_photo("P1", size)

    @pytest.mark.asyncio
    async def test_missing_object(self, photo_service):
        with pytest.raises(NotFoundError):
            await photo_service.fetch_photo("P1", "preview")

    @pytest.mark.asyncio
    async def test_delete_objects(self, photo_service, storage):
        for key in object_keys("P1"):
            await storage.upload(key, b"x")

        await photo_service.delete_objects("P1")

        for key in object_keys("P1"):
            assert await storage.exists(key) is False
