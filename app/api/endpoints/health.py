"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 설정 정보(어떤 제공자와 모델을 쓰는지 등)도 같이 보여줍니다.
    API 키 값 자체는 절대 노출하지 않습니다.
    """
    settings = get_settings()
    provider = settings.provider_config()
    return {
        "status": "healthy",
        "config": {
            "provider": provider.name,  # 사용 중인 LLM 제공자
            "model": provider.model,  # 사용 중인 모델
            "api_key_configured": bool(settings.api_key_for(provider)),  # API 키 설정 여부
        }
    }
