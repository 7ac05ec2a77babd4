from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from config import logger
from config.constants import LLM_CONFIG
from config.settings import Settings, get_settings
from exceptions import InvocationError

GROUNDING_TOOL = {"google_search": {}}


class GeminiClient:
    """Reasoning engine client for the Gemini generateContent REST API.

    Holds no connection state between calls, so one instance can serve
    concurrent verification runs.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com",
        request_timeout: float = LLM_CONFIG.REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    def build_body(
        self,
        prompt: str,
        grounding: bool = False,
        safety_settings: Optional[List[Dict[str, str]]] = None,
        generation_config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        if generation_config:
            body["generationConfig"] = generation_config
        if safety_settings:
            body["safetySettings"] = safety_settings
        if grounding:
            body["tools"] = [GROUNDING_TOOL]
        return body

    async def generate_content(
        self,
        prompt: str,
        *,
        grounding: bool = False,
        safety_settings: Optional[List[Dict[str, str]]] = None,
        generation_config: Optional[Dict[str, Any]] = None,
    ) -> str:
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        body = self.build_body(prompt, grounding, safety_settings, generation_config)
        try:
            async with httpx.AsyncClient(timeout=self.request_timeout) as client:
                response = await client.post(self.endpoint, headers=headers, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Gemini HTTP error %s: %s", e.response.status_code, e.response.text)
            raise InvocationError(f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.error("Gemini request error: %s", str(e))
            raise InvocationError(f"Request failed: {str(e)}")
        except ValueError as e:
            logger.error("Gemini returned a non-JSON body: %s", str(e))
            raise InvocationError("Malformed response body")

        text = extract_response_text(data)
        if not text:
            block_reason = None
            if isinstance(data, dict):
                block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            logger.warning("Gemini returned no text (block reason: %s)", block_reason)
            raise InvocationError(f"Empty response (block reason: {block_reason})")
        return text


def extract_response_text(data: Any) -> str:
    """Concatenate the text parts of the first candidate."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        return ""
    content = first.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    texts = [part.get("text") for part in parts if isinstance(part, dict)]
    return "".join(t for t in texts if isinstance(t, str))


@dataclass(frozen=True)
class EngineInitResult:
    client: Optional[GeminiClient]
    configured: bool
    message: str


def initialize_engine(settings: Optional[Settings] = None) -> EngineInitResult:
    """Construct the engine client if a credential is available."""
    settings = settings or get_settings()
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not configured; verification disabled.")
        return EngineInitResult(None, False, "GEMINI_API_KEY not set")

    client = GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        request_timeout=settings.GEMINI_REQUEST_TIMEOUT,
    )
    return EngineInitResult(client, True, "Gemini verification service ready")
