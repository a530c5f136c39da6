"""에러 응답 모델."""

from typing import Optional, Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """구조화된 API 에러 응답 모델."""

    error: str = Field(description="에러 메시지")
    details: Optional[Any] = Field(default=None, description="업스트림 응답 등 추가 정보")
    message: Optional[str] = Field(default=None, description="예외 메시지")
    stack: Optional[str] = Field(default=None, description="스택 트레이스 (개발 모드 전용)")

    def to_content(self) -> dict:
        """값이 있는 필드만 JSON 본문으로 변환합니다."""
        return self.model_dump(exclude_none=True)
