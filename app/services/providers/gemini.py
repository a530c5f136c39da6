"""Google Gemini generateContent adapter."""

from typing import Any

from app.models import ProviderConfig

from .base import ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    """첫 번째 candidate 의 parts 텍스트를 줄바꿈으로 이어 붙입니다."""

    def build_body(self, prompt: str, config: ProviderConfig) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": config.max_tokens},
        }

    def extract_text(self, data: Any) -> list[str]:
        parts = data["candidates"][0]["content"]["parts"]
        return [part["text"] for part in parts if isinstance(part.get("text"), str)]
