"""
Google Cloud Translation provider (v2 REST API).

Authenticates with an API key. Requests use format=text so results are
not HTML-escaped.
"""

from __future__ import annotations

import logging

import httpx

from f10n.core.languages import to_bcp47
from f10n.providers.base import TranslationProvider

logger = logging.getLogger(__name__)


DEFAULT_URL = "https://translation.googleapis.com/language/translate/v2"

# The v2 API accepts at most 128 segments per request
MAX_SEGMENTS = 128


class GoogleTranslationProvider(TranslationProvider):
    """Translates through the Google Cloud Translation REST API."""
    
    name = "google"
    
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_URL,
        timeout: float | None = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        super().__init__(timeout=timeout)
        if not api_key:
            raise ValueError("F10N_GOOGLE_TRANSLATE_API_KEY not set")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
    
    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client
    
    async def _post(self, path: str, data: dict) -> dict:
        response = await self.client.post(
            f"{self.base_url}{path}",
            params={"key": self.api_key},
            json=data,
        )
        if response.status_code != 200:
            logger.error(f"Google Translate error {response.status_code}: {response.text}")
            response.raise_for_status()
        
        result = response.json()
        if "data" not in result:
            raise ValueError("unexpected response format")
        return result["data"]
    
    async def _detect(self, sample: str) -> str:
        data = await self._post("/detect", {"q": [sample]})
        detections = data.get("detections") or [[]]
        best = detections[0][0] if detections[0] else {}
        return best.get("language", "")
    
    async def _translate(self, texts: list[str], source: str, target: str) -> list[str]:
        translations: list[str] = []
        for i in range(0, len(texts), MAX_SEGMENTS):
            chunk = texts[i:i + MAX_SEGMENTS]
            data = await self._post("", {
                "q": chunk,
                "source": to_bcp47(source),
                "target": to_bcp47(target),
                "format": "text",
            })
            translations.extend(t["translatedText"] for t in data.get("translations", []))
        return translations
    
    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
