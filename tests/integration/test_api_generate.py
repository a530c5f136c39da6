"""
제안서 생성 API 통합 테스트.
POST/OPTIONS/기타 메서드, 입력 검증, 업스트림 에러 전달, CORS 헤더를 확인합니다.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.main import create_app
from app.services import get_proposal_generator

GENERATE_URL = "/api/generate"

CORS_EXPECTED = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response):
    for name, value in CORS_EXPECTED.items():
        assert response.headers[name] == value


async def test_generate_success(client: AsyncClient, upstream):
    """유효한 요청은 200 과 proposal 을 반환하고 외부 호출은 정확히 1회여야 한다."""
    response = await client.post(
        GENERATE_URL,
        json={"jobDescription": "Build a Shopify store", "skills": "Liquid"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "proposal": "Hi there,\nI would love to help with your project."
    }
    assert len(upstream.requests) == 1
    assert_cors(response)


async def test_generate_is_idempotent(client: AsyncClient):
    """같은 입력과 같은 업스트림 응답이면 같은 proposal 이 나와야 한다."""
    payload = {"jobDescription": "Write a scraper", "experience": "2 years"}

    first = await client.post(GENERATE_URL, json=payload)
    second = await client.post(GENERATE_URL, json=payload)

    assert first.json()["proposal"] == second.json()["proposal"]


@pytest.mark.parametrize(
    "payload",
    [{}, {"jobDescription": ""}, {"jobDescription": None}, {"skills": "Python"}],
)
async def test_missing_job_description(client: AsyncClient, upstream, payload):
    """jobDescription 이 없거나 비면 400 과 고정 메시지를 반환하고 외부 호출은 없어야 한다."""
    response = await client.post(GENERATE_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Job description is required"}
    assert upstream.requests == []
    assert_cors(response)


async def test_whitespace_job_description_is_forwarded(client: AsyncClient, upstream):
    """공백만 있는 jobDescription 도 비어 있지 않으므로 외부 호출 1회 후 200 이어야 한다."""
    response = await client.post(GENERATE_URL, json={"jobDescription": "   "})

    assert response.status_code == 200
    assert len(upstream.requests) == 1


async def test_non_json_body_is_treated_as_missing(client: AsyncClient, upstream):
    response = await client.post(
        GENERATE_URL, content="not json", headers={"Content-Type": "text/plain"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Job description is required"
    assert upstream.requests == []


async def test_wrong_field_type_is_rejected(client: AsyncClient, upstream):
    response = await client.post(GENERATE_URL, json={"jobDescription": ["a", "b"]})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
    assert upstream.requests == []


async def test_missing_api_key(client: AsyncClient, make_generator, upstream):
    """API 키가 없으면 500 설정 에러를 반환하고 외부 호출은 없어야 한다."""
    from app.main import app

    app.dependency_overrides[get_proposal_generator] = lambda: make_generator(api_key="")

    response = await client.post(GENERATE_URL, json={"jobDescription": "x"})

    assert response.status_code == 500
    assert "ANTHROPIC_API_KEY" in response.json()["error"]
    assert upstream.requests == []
    assert_cors(response)


async def test_upstream_429_is_forwarded(client: AsyncClient, upstream):
    """업스트림 429 는 상태 코드와 상세 정보를 그대로 전달해야 한다."""
    error_body = {"error": {"message": "Rate limit reached", "type": "tokens"}}
    upstream.reply(429, json=error_body)

    response = await client.post(GENERATE_URL, json={"jobDescription": "x"})

    assert response.status_code == 429
    assert response.json() == {
        "error": "API request failed: Too Many Requests",
        "details": error_body,
    }
    assert_cors(response)


async def test_upstream_success_without_text(client: AsyncClient, upstream):
    """업스트림 200 이지만 텍스트가 없으면 500 malformed 에러를 반환해야 한다."""
    upstream.reply(200, json={"id": "msg_01", "type": "message"})

    response = await client.post(GENERATE_URL, json={"jobDescription": "x"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Unexpected response format from API"
    assert data["details"] == {"id": "msg_01", "type": "message"}


async def test_options_preflight(client: AsyncClient, upstream):
    """OPTIONS 는 본문 없이 200 과 CORS 헤더를 반환해야 한다."""
    response = await client.request("OPTIONS", GENERATE_URL, content="ignored body")

    assert response.status_code == 200
    assert response.content == b""
    assert upstream.requests == []
    assert_cors(response)


async def test_options_preflight_with_browser_headers(client: AsyncClient):
    response = await client.options(
        GENERATE_URL,
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
async def test_other_methods_not_allowed(client: AsyncClient, upstream, method):
    response = await client.request(method, GENERATE_URL)

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert "POST" in response.headers["allow"]
    assert upstream.requests == []
    assert_cors(response)


class TestUnexpectedErrors:
    """예상하지 못한 예외도 JSON 500 으로 변환되어야 한다."""

    @staticmethod
    async def _post_with_failing_generator(settings: Settings):
        app = create_app(settings)
        generator = AsyncMock()
        generator.generate = AsyncMock(side_effect=RuntimeError("boom"))
        app.dependency_overrides[get_proposal_generator] = lambda: generator

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            return await ac.post(GENERATE_URL, json={"jobDescription": "x"})

    async def test_message_without_stack_in_production(self):
        response = await self._post_with_failing_generator(Settings(_env_file=None, debug=False))

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to generate proposal"
        assert data["message"] == "boom"
        assert "stack" not in data
        assert_cors(response)

    async def test_stack_included_in_debug_mode(self):
        response = await self._post_with_failing_generator(Settings(_env_file=None, debug=True))

        assert response.status_code == 500
        data = response.json()
        assert "RuntimeError: boom" in data["stack"]
