import logging
from typing import Optional

import requests

from config import Settings, load_settings
from errors import ConfigurationError, EmptyResponseError, UpstreamError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin wrapper around the Gemini ``generateContent`` REST endpoint."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or load_settings()
        self._http = session or requests

    def generate(self, prompt: str, temperature: float) -> str:
        """Send one prompt and return the first candidate's text."""
        if not self.settings.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")

        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": temperature},
        }
        logger.info(
            f"Calling {self.settings.model} (temperature={temperature}, prompt_chars={len(prompt)})"
        )
        try:
            response = self._http.post(
                self.settings.endpoint,
                params={"key": self.settings.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self.settings.timeout_s,
            )
        except requests.exceptions.RequestException as e:
            # str(e) can include the request URL, and with it the key
            logger.error(f"Gemini request failed: {type(e).__name__}")
            raise UpstreamError(None, "Could not reach Gemini. Check your connection and try again.") from e

        if not response.ok:
            logger.error(f"Gemini returned HTTP {response.status_code}")
            raise UpstreamError(response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None
        text = extract_text(data)
        if not text:
            logger.error("Gemini response carried no text part")
            raise EmptyResponseError()
        return text


def extract_text(data) -> Optional[str]:
    """Pull ``candidates[0].content.parts[0].text`` out of a response envelope."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None
