"""
LLM 제공자 설정 데이터 모델입니다.
엔드포인트, 인증 방식, 요청 본문 형식을 한곳에 정의합니다.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthMode(str, Enum):
    """API 키를 요청의 어디에 실어 보낼지 정의합니다."""

    HEADER_KEY = "header-key"      # x-api-key 헤더 (Anthropic)
    QUERY_KEY = "query-key"        # ?key= 쿼리 스트링 (Gemini)
    BEARER_TOKEN = "bearer-token"  # Authorization: Bearer (Groq 등 OpenAI 호환)


class RequestBodyShape(str, Enum):
    """제공자별 요청/응답 본문 규약입니다."""

    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    OPENAI_CHAT = "openai-chat"


class ProviderConfig(BaseModel):
    """
    하나의 LLM 제공자에 대한 불변 설정입니다.
    프로세스 시작 시 한 번 선택되고 이후 변경되지 않습니다.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="제공자 이름")
    endpoint: str = Field(..., description="API 주소 ({model} 치환 가능)")
    auth_mode: AuthMode
    api_key_env_var: str = Field(..., description="API 키를 담은 환경 변수 이름")
    request_body_shape: RequestBodyShape
    model: str = Field(..., description="사용할 모델 이름")
    max_tokens: int = Field(default=2000, description="최대 생성 토큰 수")

    @property
    def url(self) -> str:
        """모델 이름이 치환된 실제 호출 주소."""
        return self.endpoint.format(model=self.model)


PROVIDER_PRESETS: dict[str, ProviderConfig] = {
    "anthropic": ProviderConfig(
        name="anthropic",
        endpoint="https://api.anthropic.com/v1/messages",
        auth_mode=AuthMode.HEADER_KEY,
        api_key_env_var="ANTHROPIC_API_KEY",
        request_body_shape=RequestBodyShape.ANTHROPIC,
        model="claude-sonnet-4-20250514",
    ),
    "gemini": ProviderConfig(
        name="gemini",
        endpoint="https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
        auth_mode=AuthMode.QUERY_KEY,
        api_key_env_var="GOOGLE_API_KEY",
        request_body_shape=RequestBodyShape.GEMINI,
        model="gemini-1.5-flash",
    ),
    "groq": ProviderConfig(
        name="groq",
        endpoint="https://api.groq.com/openai/v1/chat/completions",
        auth_mode=AuthMode.BEARER_TOKEN,
        api_key_env_var="GROQ_API_KEY",
        request_body_shape=RequestBodyShape.OPENAI_CHAT,
        model="llama-3.3-70b-versatile",
    ),
}
