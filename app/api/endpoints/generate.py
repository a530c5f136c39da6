"""
제안서 생성 API입니다.
채용 공고(jobDescription)를 받아 LLM 이 작성한 Upwork 제안서를 반환합니다.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ProposalGeneratorError, UnexpectedError, ValidationError
from app.models import ProposalRequest, ProposalResponse
from app.services import ProposalGenerator, get_proposal_generator

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_payload(request: Request) -> dict:
    """요청 본문을 JSON 객체로 읽습니다. 본문이 없거나 깨졌으면 빈 dict."""
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning("[generate] JSON 이 아닌 요청 본문")
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post("", response_model=ProposalResponse)
async def generate_proposal(
    request: Request,
    generator: ProposalGenerator = Depends(get_proposal_generator),
) -> ProposalResponse:
    """
    제안서 생성 API.

    요청 본문:
    - jobDescription: 채용 공고 (필수)
    - skills: 보유 기술 (선택)
    - experience: 관련 경력 (선택)
    """
    payload = await _read_payload(request)

    try:
        proposal_request = ProposalRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid request body", details=e.errors(include_url=False)
        )

    try:
        proposal = await generator.generate(proposal_request)
    except ProposalGeneratorError:
        raise
    except Exception as e:
        logger.error(f"[generate] 제안서 생성 중 예외: {type(e).__name__}: {e}", exc_info=True)
        raise UnexpectedError("Failed to generate proposal", details=str(e)) from e

    return ProposalResponse(proposal=proposal)


@router.options("")
async def preflight() -> Response:
    """CORS 사전 요청(preflight). 본문 없이 200 을 반환합니다."""
    return Response(status_code=200)
