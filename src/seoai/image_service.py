"""
Image generation clients for the icon pipeline.

Each client turns a text prompt into raw image bytes. The OpenAI client calls
the images endpoint; the Replicate client runs an icon model and then a
background-removal model; the mock client draws a placeholder locally.
"""

import io
import logging
import time
from typing import Any, Dict, Optional

import requests
from PIL import Image, ImageDraw

from seoai.config import (
    HTTP_TIMEOUT,
    OPENAI_IMAGE_MODEL,
    OPENAI_IMAGE_SIZE,
    OPENAI_IMAGES_URL,
    REPLICATE_API_URL,
    REPLICATE_ICON_MODEL_VERSION,
    REPLICATE_MAX_WAIT,
    REPLICATE_POLL_INTERVAL,
    REPLICATE_REMBG_MODEL_VERSION,
)
from seoai.exceptions import ImageGenerationError

logger = logging.getLogger(__name__)


def download_image(url: str, timeout: int = HTTP_TIMEOUT) -> bytes:
    """Download ``url`` and return the response body."""
    logger.info(f"Downloading image from {url}")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


class OpenAIImageClient:
    """Generates images through the OpenAI images endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = OPENAI_IMAGE_MODEL,
        size: str = OPENAI_IMAGE_SIZE,
        timeout: int = HTTP_TIMEOUT,
    ):
        self.api_key = api_key
        self.model = model
        self.size = size
        self.timeout = timeout

    def build_prompt(self, icon_definition: str) -> str:
        return (
            f"beautiful icon for a {icon_definition} with rounded edges and solid background "
            "color that represents the concept of the app"
        )

    def generate_url(self, icon_definition: str) -> str:
        """
        Request one image and return its URL.

        Raises:
            ImageGenerationError: If the response carries no image URL.
        """
        response = requests.post(
            OPENAI_IMAGES_URL,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            json={
                "model": self.model,
                "prompt": self.build_prompt(icon_definition),
                "n": 1,
                "size": self.size,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json().get("data") or []
        if not data or not data[0].get("url"):
            raise ImageGenerationError("OpenAI returned no image URL")
        return data[0]["url"]

    def generate(self, icon_definition: str) -> bytes:
        return download_image(self.generate_url(icon_definition), self.timeout)


class ReplicateImageClient:
    """
    Generates app icons on Replicate and removes their background.
    """

    def __init__(
        self,
        api_token: str,
        timeout: int = HTTP_TIMEOUT,
        poll_interval: float = REPLICATE_POLL_INTERVAL,
        max_wait: int = REPLICATE_MAX_WAIT,
    ):
        self.api_token = api_token
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.max_wait = max_wait

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_token}",
            "Prefer": "wait",
        }

    @staticmethod
    def _first_output(output: Any) -> Optional[str]:
        if isinstance(output, list):
            return output[0] if output else None
        return output

    def run(self, version: str, model_input: Dict[str, Any]) -> str:
        """
        Run a prediction and wait for its first output URL.

        Args:
            version (str): Model version hash.
            model_input (Dict[str, Any]): Model input.

        Returns:
            str: URL of the first output.

        Raises:
            ImageGenerationError: If the prediction fails, is canceled, or times out.
        """
        response = requests.post(
            REPLICATE_API_URL,
            headers=self._headers(),
            json={"version": version, "input": model_input},
            timeout=self.timeout,
        )
        response.raise_for_status()
        prediction = response.json()

        deadline = time.monotonic() + self.max_wait
        while prediction.get("status") not in ("succeeded", "failed", "canceled"):
            if time.monotonic() > deadline:
                raise ImageGenerationError(
                    f"Replicate prediction {prediction.get('id')} timed out after {self.max_wait}s"
                )
            time.sleep(self.poll_interval)
            poll = requests.get(
                prediction["urls"]["get"], headers=self._headers(), timeout=self.timeout
            )
            poll.raise_for_status()
            prediction = poll.json()

        if prediction["status"] != "succeeded":
            raise ImageGenerationError(
                f"Replicate prediction {prediction['status']}: {prediction.get('error')}"
            )
        url = self._first_output(prediction.get("output"))
        if not url:
            raise ImageGenerationError("Replicate returned no output")
        return url

    def generate_url(self, icon_definition: str) -> str:
        logger.info(f"Generating icon on Replicate for '{icon_definition}'")
        icon_url = self.run(
            REPLICATE_ICON_MODEL_VERSION,
            {
                "width": 512,
                "height": 512,
                "prompt": f"beautiful, high-quality {icon_definition} icon with rounded borders",
                "refine": "no_refiner",
                "scheduler": "K_EULER",
                "lora_scale": 0.6,
                "guidance_scale": 7.5,
                "high_noise_frac": 0.8,
                "num_inference_steps": 50,
            },
        )
        logger.info("Removing icon background")
        return self.run(REPLICATE_REMBG_MODEL_VERSION, {"image": icon_url})

    def generate(self, icon_definition: str) -> bytes:
        return download_image(self.generate_url(icon_definition), self.timeout)


class MockImageClient:
    """Draws a placeholder icon without calling any service."""

    def __init__(self, size: int = 256, color: str = "#4f46e5"):
        self.size = size
        self.color = color

    def generate(self, icon_definition: str) -> bytes:
        logger.info(f"Mock image client drawing placeholder for '{icon_definition}'")
        image = Image.new("RGBA", (self.size, self.size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)
        draw.rounded_rectangle(
            (0, 0, self.size - 1, self.size - 1), radius=self.size // 5, fill=self.color
        )
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
