"""공유 pytest fixture 모음."""

import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from app.models import PROVIDER_PRESETS, ProposalRequest
from app.services import ProposalGenerator, get_proposal_generator

from tests.payloads import ANTHROPIC_OK


class UpstreamStub:
    """Simulated LLM provider: records every request and returns a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json = ANTHROPIC_OK
        self.text = None

    def reply(self, status_code: int = 200, json=None, text: str = None):
        self.status_code = status_code
        self.json = json
        self.text = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def make_generator(upstream):
    """ProposalGenerator factory wired to the simulated upstream."""

    def _make(provider: str = "anthropic", api_key: str = "test-key") -> ProposalGenerator:
        return ProposalGenerator(
            provider=PROVIDER_PRESETS[provider],
            api_key=api_key,
            timeout=5.0,
            transport=upstream.transport,
        )

    return _make


@pytest.fixture
def sample_request():
    return ProposalRequest(
        jobDescription="Need a Django developer to build a REST API.",
        skills="Python, Django",
        experience="5 years backend",
    )


@pytest.fixture
async def client(make_generator):
    """httpx AsyncClient (in-process) with the generator dependency overridden."""
    from app.main import app

    generator = make_generator()
    app.dependency_overrides[get_proposal_generator] = lambda: generator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
