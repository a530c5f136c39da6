"""Upwork proposal generator service.

채용 공고를 받아 프롬프트를 만들고, 설정된 LLM 제공자에 한 번 요청하여
생성된 제안서 텍스트를 돌려줍니다.

처리 순서:
1. jobDescription 존재 확인 → ValidationError
2. API 키 존재 확인 → ConfigurationError
3. 프롬프트 생성 (skills/experience 기본값 "Not specified")
4. 제공자 어댑터로 요청 1회 전송 (재시도 없음)
5. 2xx 가 아니면 → UpstreamError (상태 코드 그대로 전달)
6. 응답 구조가 다르면 → MalformedResponseError
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from app.config import get_settings
from app.exceptions import ConfigurationError, UnexpectedError, UpstreamError, ValidationError
from app.models import ProposalRequest, ProviderConfig
from app.prompts import build_proposal_prompt

from .providers import ProviderAdapter, get_adapter

logger = logging.getLogger(__name__)

JOB_DESCRIPTION_REQUIRED = "Job description is required"


class ProposalGenerator:
    """
    단일 LLM 제공자에 대한 제안서 생성기.

    Attributes:
        provider: 불변 제공자 설정
        adapter: 제공자별 요청/응답 변환기
        _api_key: 제공자 API 키 (로그에 남기지 않음)
        _timeout: 외부 호출 타임아웃(초)
        _transport: 테스트용 httpx transport (기본값은 실제 네트워크)
    """

    def __init__(
        self,
        provider: ProviderConfig,
        api_key: Optional[str],
        timeout: float = 60.0,
        adapter: Optional[ProviderAdapter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.provider = provider
        self.adapter = adapter or get_adapter(provider)
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def generate(self, request: ProposalRequest) -> str:
        """
        제안서를 생성합니다.

        Args:
            request: 채용 공고와 선택 입력

        Returns:
            생성된 제안서 텍스트

        Raises:
            ValidationError: jobDescription 누락
            ConfigurationError: API 키 누락
            UpstreamError: 제공자가 2xx 가 아닌 응답을 반환
            MalformedResponseError: 응답에서 텍스트를 찾을 수 없음
            UnexpectedError: 네트워크 오류, 타임아웃
        """
        if not request.job_description:
            raise ValidationError(JOB_DESCRIPTION_REQUIRED)

        if not self._api_key:
            env_var = self.provider.api_key_env_var
            logger.error(f"[ProposalGenerator] {env_var} 가 설정되지 않았습니다")
            raise ConfigurationError(
                f"API key not configured. Please add {env_var} to your environment variables."
            )

        prompt = build_proposal_prompt(
            request.job_description, request.skills, request.experience
        )
        http_request = self.adapter.build_request(prompt, self.provider, self._api_key)

        response = await self._send(http_request)

        if not response.is_success:
            details = self._read_error_body(response)
            logger.error(
                f"[ProposalGenerator] {self.provider.name} API 에러: "
                f"{response.status_code} {details}"
            )
            raise UpstreamError(
                f"API request failed: {response.reason_phrase or response.status_code}",
                status_code=response.status_code,
                details=details,
            )

        proposal = self.adapter.parse_response(response)
        logger.info(f"[ProposalGenerator] 제안서 생성 완료: {len(proposal)} chars")
        return proposal

    async def _send(self, http_request: httpx.Request) -> httpx.Response:
        """요청을 정확히 한 번 전송합니다. 클라이언트는 호출마다 열고 닫습니다."""
        logger.info(
            f"[ProposalGenerator] {self.provider.name} 호출 (model={self.provider.model})"
        )
        start_time = datetime.now()

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.send(http_request)
        except httpx.HTTPError as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(
                f"[ProposalGenerator] 호출 실패 ({elapsed:.1f}초): {type(e).__name__}: {e}"
            )
            raise UnexpectedError("Failed to generate proposal", details=str(e)) from e

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"[ProposalGenerator] 응답 수신: {elapsed:.1f}초, status={response.status_code}"
        )
        return response

    @staticmethod
    def _read_error_body(response: httpx.Response) -> Any:
        """에러 응답 본문을 JSON 으로 읽고, 실패하면 텍스트로 돌려줍니다."""
        try:
            return response.json()
        except ValueError:
            return response.text


# Singleton instance for dependency injection
_proposal_generator: Optional[ProposalGenerator] = None


def get_proposal_generator() -> ProposalGenerator:
    """Get or create proposal generator singleton from settings."""
    global _proposal_generator
    if _proposal_generator is None:
        settings = get_settings()
        provider = settings.provider_config()
        _proposal_generator = ProposalGenerator(
            provider=provider,
            api_key=settings.api_key_for(provider),
            timeout=settings.request_timeout,
        )
    return _proposal_generator
