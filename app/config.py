from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings

from app.models.provider import ProviderConfig, PROVIDER_PRESETS


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # LLM 제공자 선택: 프로세스 시작 시 한 번만 결정됩니다
    llm_provider: Literal["anthropic", "gemini", "groq"] = "anthropic"

    # API 키: 선택된 제공자의 키 하나만 있으면 됩니다
    anthropic_api_key: str = ""
    google_api_key: str = ""
    groq_api_key: str = ""

    # 모델 설정 (비워두면 제공자별 기본 모델 사용)
    llm_model: Optional[str] = None
    max_tokens: int = 2000

    # 외부 API 호출 타임아웃(초). 호스트 플랫폼의 함수 실행 제한보다 짧아야 합니다
    request_timeout: float = 60.0

    # 개발 모드: 켜면 500 응답에 스택 트레이스를 포함합니다
    debug: bool = False

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def provider_config(self) -> ProviderConfig:
        """
        선택된 제공자의 불변 설정(ProviderConfig)을 만듭니다.
        모델 이름과 max_tokens는 환경 변수로 덮어쓸 수 있습니다.
        """
        preset = PROVIDER_PRESETS[self.llm_provider]
        overrides = {"max_tokens": self.max_tokens}
        if self.llm_model:
            overrides["model"] = self.llm_model
        return preset.model_copy(update=overrides)

    def api_key_for(self, provider: ProviderConfig) -> str:
        """제공자가 요구하는 환경 변수 이름으로 API 키를 찾습니다."""
        return getattr(self, provider.api_key_env_var.lower(), "")


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
