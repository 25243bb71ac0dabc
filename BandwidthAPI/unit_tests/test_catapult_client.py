"""
Tests for the Catapult media operations
"""

import asyncio
import io
import json

import httpx
import pytest

from BandwidthAPI.clients.codecs import JSONCodec
from BandwidthAPI.clients.exceptions import RequestTimeoutError, ServiceError
from BandwidthAPI.schemas.media import MediaFile

MEDIA_URL = "https://api.example.com/v1/users/u-123/media"


class TestMediaFiles:
    """Listing and removing media files"""

    @pytest.mark.asyncio
    async def test_get_media_files(self, catapult_client, recorder):
        body = json.dumps([
            {"contentLength": 1024, "mediaName": "greeting.mp3", "content": f"{MEDIA_URL}/greeting.mp3"},
            {"contentLength": 2048, "mediaName": "logo.png", "content": f"{MEDIA_URL}/logo.png"}
        ]).encode()
        handler = recorder(content=body, headers={"Content-Type": "application/json"})
        client = catapult_client(handler)

        media_files = await client.get_media_files()

        assert [m.media_name for m in media_files] == ["greeting.mp3", "logo.png"]
        assert media_files[0] == MediaFile(content_length=1024, media_name="greeting.mp3",
                                           content=f"{MEDIA_URL}/greeting.mp3")
        request = handler.requests[0]
        assert request.method == "GET"
        assert str(request.url) == MEDIA_URL

    @pytest.mark.asyncio
    async def test_get_media_files_round_trip(self, catapult_client, recorder):
        """Media files served in the client's own encoding decode back equal"""
        original = [
            MediaFile(content_length=1024, media_name="greeting.mp3", content=f"{MEDIA_URL}/greeting.mp3"),
            MediaFile(media_name="empty.wav")
        ]
        client = catapult_client(recorder(content=JSONCodec().encode(original)))

        assert await client.get_media_files() == original

    @pytest.mark.asyncio
    async def test_get_media_files_empty_body(self, catapult_client, recorder):
        client = catapult_client(recorder())

        assert await client.get_media_files() == []

    @pytest.mark.asyncio
    async def test_delete_media_file(self, catapult_client, recorder):
        handler = recorder()
        client = catapult_client(handler)

        assert await client.delete_media_file("old greeting.mp3") is None

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert request.url.raw_path.decode() == "/v1/users/u-123/media/old%20greeting.mp3"

    @pytest.mark.asyncio
    async def test_delete_missing_media_file(self, catapult_client, recorder):
        client = catapult_client(recorder(status_code=404, content=b'{"message": "Media not found"}'))

        with pytest.raises(ServiceError) as exc_info:
            await client.delete_media_file("missing.mp3")

        assert str(exc_info.value) == "Media not found"
        assert exc_info.value.status_code == 404


class TestMediaUpload:
    """Uploading media content"""

    @pytest.mark.asyncio
    async def test_upload_from_path(self, catapult_client, recorder, tmp_path):
        media = tmp_path / "logo.png"
        media.write_bytes(b"\x89PNG\r\n")
        handler = recorder()
        client = catapult_client(handler)

        await client.upload_media_file("logo.png", media, "image/png")

        request = handler.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{MEDIA_URL}/logo.png"
        assert request.content == b"\x89PNG\r\n"
        assert request.headers["Content-Type"] == "image/png"

    @pytest.mark.asyncio
    async def test_upload_from_file_object(self, catapult_client, recorder):
        handler = recorder()
        client = catapult_client(handler)

        await client.upload_media_file("note.txt", io.BytesIO(b"hello"))

        request = handler.requests[0]
        assert request.content == b"hello"
        assert request.headers["Content-Type"] == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_upload_missing_file(self, catapult_client, recorder, tmp_path):
        """A local file that cannot be read fails before any request"""
        handler = recorder()
        client = catapult_client(handler)

        with pytest.raises(FileNotFoundError):
            await client.upload_media_file("missing.png", tmp_path / "missing.png")

        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_concurrent_uploads(self, catapult_client, recorder):
        """Concurrent calls on one client do not share request state"""
        handler = recorder()
        client = catapult_client(handler)
        names = [f"file-{i}.bin" for i in range(5)]

        await asyncio.gather(*[
            client.upload_media_file(name, name.encode()) for name in names
        ])

        sent = {request.url.path.rsplit("/", 1)[-1]: request.content for request in handler.requests}
        assert sent == {name: name.encode() for name in names}


class TestMediaDownload:
    """Downloading media content"""

    @pytest.mark.asyncio
    async def test_download(self, catapult_client, recorder):
        handler = recorder(content=b"\x89PNG", headers={"Content-Type": "image/png"})
        client = catapult_client(handler)

        content, content_type = await client.download_media_file("logo.png")

        assert content == b"\x89PNG"
        assert content_type == "image/png"
        assert handler.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_download_error(self, catapult_client, recorder):
        client = catapult_client(recorder(status_code=500))

        with pytest.raises(ServiceError) as exc_info:
            await client.download_media_file("logo.png")

        assert exc_info.value.status_code == 500


class TestSharedHttpClient:
    """Clients created without an http_client open one per call"""

    @pytest.mark.asyncio
    async def test_per_call_client(self, monkeypatch):
        from BandwidthAPI.clients import CatapultClient

        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        real_async_client = httpx.AsyncClient

        def patched_client(**kwargs):
            assert kwargs["timeout"] == httpx.Timeout(7)
            return real_async_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", patched_client)
        client = CatapultClient("u-123", "token", "secret", timeout=7)

        assert await client.get_media_files() == []
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_per_call_client_timeout(self, monkeypatch):
        """Without a shared client the constructor timeout is reported"""
        from BandwidthAPI.clients import CatapultClient

        def stall(request):
            raise httpx.ReadTimeout("timed out", request=request)

        real_async_client = httpx.AsyncClient

        def patched_client(**kwargs):
            return real_async_client(transport=httpx.MockTransport(stall), **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", patched_client)
        client = CatapultClient("u-123", "token", "secret", timeout=7)

        with pytest.raises(RequestTimeoutError) as exc_info:
            await client.get_media_files()

        assert exc_info.value.timeout_duration == 7
