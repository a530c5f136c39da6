"""LLM provider adapters, selected by request body shape."""

from app.models import ProviderConfig, RequestBodyShape

from .base import ProviderAdapter
from .anthropic import AnthropicAdapter
from .gemini import GeminiAdapter
from .openai_chat import OpenAIChatAdapter

_ADAPTERS: dict[RequestBodyShape, type[ProviderAdapter]] = {
    RequestBodyShape.ANTHROPIC: AnthropicAdapter,
    RequestBodyShape.GEMINI: GeminiAdapter,
    RequestBodyShape.OPENAI_CHAT: OpenAIChatAdapter,
}


def get_adapter(config: ProviderConfig) -> ProviderAdapter:
    """제공자 설정의 본문 형식에 맞는 어댑터를 반환합니다."""
    return _ADAPTERS[config.request_body_shape]()


__all__ = [
    "ProviderAdapter",
    "AnthropicAdapter",
    "GeminiAdapter",
    "OpenAIChatAdapter",
    "get_adapter",
]
