"""Provider adapter contract.

각 LLM 제공자는 요청 생성(build_request)과 응답 해석(parse_response)
두 가지만 다르게 구현합니다. 인증 정보 배치는 AuthMode 에 따라 공통 처리됩니다.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from app.exceptions import MalformedResponseError
from app.models import AuthMode, ProviderConfig

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """LLM 제공자 어댑터 기본 클래스."""

    def build_request(
        self, prompt: str, config: ProviderConfig, api_key: str
    ) -> httpx.Request:
        """
        프롬프트를 제공자 형식의 HTTP 요청으로 변환합니다.

        Args:
            prompt: 완성된 프롬프트 텍스트
            config: 제공자 설정
            api_key: 제공자 API 키

        Returns:
            전송 준비가 끝난 httpx.Request
        """
        headers = {"Content-Type": "application/json"}
        params = {}

        if config.auth_mode == AuthMode.HEADER_KEY:
            headers["x-api-key"] = api_key
        elif config.auth_mode == AuthMode.QUERY_KEY:
            params["key"] = api_key
        elif config.auth_mode == AuthMode.BEARER_TOKEN:
            headers["Authorization"] = f"Bearer {api_key}"

        headers.update(self.extra_headers())

        return httpx.Request(
            "POST",
            config.url,
            headers=headers,
            params=params,
            json=self.build_body(prompt, config),
        )

    def extra_headers(self) -> dict[str, str]:
        """제공자 고유 헤더 (예: anthropic-version)."""
        return {}

    @abstractmethod
    def build_body(self, prompt: str, config: ProviderConfig) -> dict[str, Any]:
        """제공자 규약에 맞는 JSON 요청 본문."""

    @abstractmethod
    def extract_text(self, data: Any) -> list[str]:
        """
        응답 JSON 에서 텍스트 조각들을 꺼냅니다.
        구조가 다르면 KeyError, IndexError 등을 그대로 던집니다.
        """

    def parse_response(self, response: httpx.Response) -> str:
        """
        2xx 응답에서 생성된 텍스트를 추출합니다.

        Raises:
            MalformedResponseError: JSON 이 아니거나 예상 경로에 텍스트가 없을 때
        """
        try:
            data = response.json()
        except ValueError:
            logger.error(f"[{type(self).__name__}] JSON 이 아닌 응답: {response.text[:200]}")
            raise MalformedResponseError(
                "Unexpected response format from API",
                details=response.text,
            )

        try:
            fragments = self.extract_text(data)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(f"[{type(self).__name__}] 응답 구조 오류: {type(e).__name__}: {e}")
            raise MalformedResponseError(
                "Unexpected response format from API", details=data
            )

        if not fragments:
            raise MalformedResponseError(
                "Unexpected response format from API", details=data
            )

        return "\n".join(fragments)
