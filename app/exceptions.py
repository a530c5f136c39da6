"""
제안서 생성 서비스 커스텀 예외 계층입니다.
각 실패 유형별로 에러 코드, 메시지, HTTP 상태 코드를 제공합니다.
"""

from typing import Optional, Any


class ProposalGeneratorError(Exception):
    """제안서 생성 서비스 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
        status_code: int = 500,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ProposalGeneratorError):
    """필수 입력 누락 (400 응답, 재시도하지 않음)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(
            message, error_code="ERR_INPUT_001", details=details, status_code=400
        )


class ConfigurationError(ProposalGeneratorError):
    """API 키 등 운영 설정 누락 (500 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CONFIG_001", details=details)


class UpstreamError(ProposalGeneratorError):
    """LLM 제공자가 2xx가 아닌 응답을 반환한 경우. 상태 코드를 그대로 전달합니다."""

    def __init__(
        self, message: str, status_code: int, details: Optional[Any] = None
    ):
        super().__init__(
            message,
            error_code="ERR_UPSTREAM_001",
            details=details,
            status_code=status_code,
        )


class MalformedResponseError(ProposalGeneratorError):
    """2xx 응답이지만 예상한 구조가 아닌 경우. 원본 페이로드를 details에 담습니다."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_RESPONSE_001", details=details)


class UnexpectedError(ProposalGeneratorError):
    """그 밖의 실행 중 예외 (네트워크 오류, 타임아웃 등)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INTERNAL", details=details)
