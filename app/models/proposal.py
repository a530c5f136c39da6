"""
제안서 요청/응답 데이터 모델입니다.
프론트엔드가 보내는 camelCase 키(jobDescription 등)를 그대로 받습니다.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProposalRequest(BaseModel):
    """
    제안서 생성 요청입니다.

    job_description 은 필수지만 모델 단계에서는 비어 있는 값도 허용합니다.
    누락 여부는 ProposalGenerator 가 검사하여 정해진 400 메시지를 돌려줍니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    job_description: Optional[str] = Field(
        default=None, alias="jobDescription", description="채용 공고 본문"
    )
    skills: Optional[str] = Field(default=None, description="보유 기술")
    experience: Optional[str] = Field(default=None, description="관련 경력")


class ProposalResponse(BaseModel):
    """성공 응답: 생성된 제안서 텍스트."""

    proposal: str
