"""
Tests for the Atlas Cloud image generator
"""

import asyncio
import json

import httpx
import pytest

from app.config import IMAGE_MODEL
from app.core import ImageGenerationError
from app.services.pipeline.image_generation import ImageGenerator


class TestImageGenerator:
    @pytest.mark.asyncio
    async def test_returns_first_output(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"outputs": ["https://img/1.png", "https://img/2.png"]}})

        generator = ImageGenerator(transport=httpx.MockTransport(handler))

        url = await generator.generate("a design prompt", "atlas-key")

        assert url == "https://img/1.png"
        assert captured["auth"] == "Bearer atlas-key"
        assert captured["body"]["prompt"] == "a design prompt"
        assert captured["body"]["model"] == IMAGE_MODEL
        assert captured["body"]["enable_sync_mode"] is True
        assert captured["body"]["enable_base64_output"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"data": {}}, {"data": {"outputs": []}}, ["not", "a", "dict"]])
    async def test_missing_output(self, body):
        generator = ImageGenerator(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=body)))

        with pytest.raises(ImageGenerationError, match="No image URL returned from API"):
            await generator.generate("prompt", "atlas-key")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        generator = ImageGenerator(transport=httpx.MockTransport(handler))

        with pytest.raises(ImageGenerationError, match="timed out") as exc_info:
            await generator.generate("prompt", "atlas-key")

        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    @pytest.mark.asyncio
    async def test_http_error(self):
        generator = ImageGenerator(transport=httpx.MockTransport(lambda request: httpx.Response(401)))

        with pytest.raises(ImageGenerationError, match="HTTP 401"):
            await generator.generate("prompt", "bad-key")

    @pytest.mark.asyncio
    async def test_download(self):
        def handler(request):
            return httpx.Response(200, content=b"\x89PNG...")

        generator = ImageGenerator(transport=httpx.MockTransport(handler))

        assert await generator.download("https://img/1.png") == b"\x89PNG..."

    @pytest.mark.asyncio
    async def test_download_failure(self):
        generator = ImageGenerator(transport=httpx.MockTransport(lambda request: httpx.Response(404)))

        with pytest.raises(ImageGenerationError, match="download failed"):
            await generator.download("https://img/missing.png")

    @pytest.mark.asyncio
    async def test_total_deadline_bounds_a_slow_response(self):
        async def handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json={"data": {"outputs": ["https://img/late.png"]}})

        generator = ImageGenerator(transport=httpx.MockTransport(handler), timeout=0.05)

        with pytest.raises(ImageGenerationError, match="timed out") as exc_info:
            await generator.generate("prompt", "atlas-key")

        assert isinstance(exc_info.value.__cause__, TimeoutError)

    @pytest.mark.asyncio
    async def test_download_total_deadline(self):
        async def handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, content=b"late")

        generator = ImageGenerator(transport=httpx.MockTransport(handler), download_timeout=0.05)

        with pytest.raises(ImageGenerationError, match="download timed out"):
            await generator.download("https://img/1.png")
