from __future__ import annotations

import base64

import httpx

from app.core.config import settings
from app.core.exceptions import ConfigurationError


class HuggingFaceImageProvider:
    name = "huggingface"

    TIMEOUT = 60

    def ready(self) -> bool:
        return settings.has_huggingface

    async def generate_image(self, prompt: str) -> str:
        """Render ``prompt`` with Stable Diffusion XL and return a PNG data URL."""
        if not self.ready():
            raise ConfigurationError("HuggingFace API token not configured")
        payload = {
            "inputs": prompt,
            "parameters": {"guidance_scale": 7.5, "width": 1280, "height": 720, "num_inference_steps": 20},
        }
        headers = {"Authorization": f"Bearer {settings.hf_api_token}", "Content-Type": "application/json"}
        async with httpx.AsyncClient(timeout=self.TIMEOUT) as client:
            response = await client.post(settings.hf_model_url, json=payload, headers=headers)
            response.raise_for_status()
            image = response.content

        return f"data:image/png;base64,{base64.b64encode(image).decode('ascii')}"
