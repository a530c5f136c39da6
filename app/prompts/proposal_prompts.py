"""Prompts for Upwork proposal generation."""

from typing import Optional

NOT_SPECIFIED = "Not specified"

PROPOSAL_PROMPT = """Generate a professional Upwork proposal for the following job posting.

Job Description:
{job_description}

My Skills: {skills}
My Experience: {experience}

Please write a compelling, personalized proposal that:
1. Demonstrates understanding of the job requirements
2. Highlights relevant skills and experience
3. Shows enthusiasm for the project
4. Includes a clear call to action
5. Is concise and professional (around 150-200 words)

Format the proposal ready to copy and paste into Upwork."""


def build_proposal_prompt(
    job_description: str,
    skills: Optional[str] = None,
    experience: Optional[str] = None,
) -> str:
    """
    채용 공고와 선택 입력으로 프롬프트를 만듭니다.
    빈 값은 "Not specified" 로 채워 같은 입력이면 항상 같은 프롬프트가 나옵니다.
    """
    return PROPOSAL_PROMPT.format(
        job_description=job_description,
        skills=skills or NOT_SPECIFIED,
        experience=experience or NOT_SPECIFIED,
    )
