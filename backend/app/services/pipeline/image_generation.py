"""
Image Generator - Atlas Cloud image synthesis.
"""

import asyncio
from typing import Optional

import httpx

from app.config import (
    IMAGE_DOWNLOAD_TIMEOUT,
    IMAGE_GENERATION_TIMEOUT,
    IMAGE_GENERATION_URL,
    IMAGE_MODEL,
    IMAGE_OUTPUT_FORMAT,
    IMAGE_RESOLUTION,
)
from app.core import get_logger, ImageGenerationError, LogTimer

logger = get_logger(__name__, service="image_generation")


class ImageGenerator:
    """Submits a design prompt and returns the hosted image URL"""

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = IMAGE_GENERATION_TIMEOUT,
        download_timeout: float = IMAGE_DOWNLOAD_TIMEOUT,
    ):
        self._transport = transport
        self._timeout = timeout
        self._download_timeout = download_timeout

    def build_payload(self, prompt: str) -> dict:
        return {
            "model": IMAGE_MODEL,
            "prompt": prompt,
            "output_format": IMAGE_OUTPUT_FORMAT,
            "resolution": IMAGE_RESOLUTION,
            "enable_base64_output": False,
            "enable_sync_mode": True,
        }

    async def generate(self, prompt: str, atlas_cloud_api_key: str) -> str:
        headers = {
            "Authorization": f"Bearer {atlas_cloud_api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with asyncio.timeout(self._timeout):
                async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                    with LogTimer(logger, "Image generation"):
                        response = await client.post(
                            IMAGE_GENERATION_URL, json=self.build_payload(prompt), headers=headers
                        )
                        response.raise_for_status()
                        body = response.json()
        except (httpx.TimeoutException, TimeoutError) as e:
            raise ImageGenerationError("Image generation timed out") from e
        except httpx.HTTPStatusError as e:
            raise ImageGenerationError(f"Image service returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ImageGenerationError(f"Image generation request failed: {e}") from e
        except ValueError as e:
            raise ImageGenerationError("Image service returned invalid JSON") from e

        image_url = self.first_output(body)
        if not image_url:
            raise ImageGenerationError("No image URL returned from API")
        logger.info("Image generated", extra={"image_url": image_url})
        return image_url

    @staticmethod
    def first_output(body) -> Optional[str]:
        """`{"data": {"outputs": [url, ...]}}` -> url"""
        if not isinstance(body, dict):
            return None
        data = body.get("data")
        outputs = data.get("outputs") if isinstance(data, dict) else None
        if not outputs or not isinstance(outputs, list):
            return None
        first = outputs[0]
        return first if isinstance(first, str) and first.strip() else None

    async def download(self, image_url: str) -> bytes:
        """Fetch raw image bytes, e.g. to re-host or inspect a generated image."""
        try:
            async with asyncio.timeout(self._download_timeout):
                async with httpx.AsyncClient(
                    transport=self._transport,
                    timeout=self._download_timeout,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(image_url)
                    response.raise_for_status()
        except (httpx.TimeoutException, TimeoutError) as e:
            raise ImageGenerationError("Image download timed out") from e
        except httpx.HTTPError as e:
            raise ImageGenerationError(f"Image download failed: {e}") from e
        return response.content
