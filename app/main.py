"""
Upwork 제안서 생성 서비스의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.

Run with:
    uvicorn app.main:app --reload --port 8000
"""

import logging
import sys
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.api.router import api_router
from app.exceptions import ProposalGeneratorError, UnexpectedError
from app.models import ErrorResponse

# 모든 응답에 붙는 CORS 헤더
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def setup_logging(settings: Settings) -> logging.Logger:
    """애플리케이션 로깅을 설정합니다."""
    level = logging.DEBUG if settings.debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    # 외부 라이브러리 로그 줄이기
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging(get_settings())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.
    시작할 때 어떤 제공자와 모델을 쓰는지 로그로 남깁니다.
    """
    settings = get_settings()
    provider = settings.provider_config()
    logger.info(f"제안서 생성기가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    logger.info(f"LLM 제공자: {provider.name} (model={provider.model})")
    if not settings.api_key_for(provider):
        logger.warning(f"{provider.api_key_env_var} 가 설정되지 않았습니다")

    yield

    logger.info("제안서 생성기가 종료됩니다")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 헤더 설정 (모든 응답에 고정 헤더 부착)
    3. 예외를 JSON 에러 응답으로 변환
    4. API 라우터 연결
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Upwork 제안서 생성기",
        description="채용 공고를 LLM 으로 보내 Upwork 제안서를 생성합니다",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",  # 개발자용 문서 주소
        redoc_url="/redoc",
    )

    # CORS 미들웨어: Origin 헤더 유무와 관계없이 모든 응답에 같은 헤더를 붙입니다.
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    def error_response(
        status_code: int, body: ErrorResponse, headers: Optional[dict] = None
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=body.to_content(),
            headers={**(headers or {}), **CORS_HEADERS},
        )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(ProposalGeneratorError)
    async def proposal_error_handler(request: Request, exc: ProposalGeneratorError):
        if isinstance(exc, UnexpectedError):
            body = ErrorResponse(error=exc.message, message=exc.details)
            if settings.debug and exc.__cause__ is not None:
                body.stack = "".join(traceback.format_exception(exc.__cause__))
        else:
            body = ErrorResponse(error=exc.message, details=exc.details)
        return error_response(exc.status_code, body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
        # 405 의 Allow 헤더 등 Starlette 가 붙인 헤더는 유지합니다
        return error_response(exc.status_code, ErrorResponse(error=message), exc.headers)

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        body = ErrorResponse(error="Failed to generate proposal", message=str(exc))
        if settings.debug:
            body.stack = "".join(traceback.format_exception(exc))
        return error_response(500, body)

    # API 라우터 포함: /api 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """
        루트 엔드포인트: 서버가 정상적으로 동작하는지 확인하는 기본 주소입니다.
        """
        return {
            "name": "Upwork 제안서 생성기",
            "version": "1.0.0",
            "description": "채용 공고로 Upwork 제안서 생성",
            "docs": "/docs",
            "api": "/api/generate",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,  # 개발 모드에서만 자동 재시작
    )
