"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.core.limiter import limiter
from app.domain.resume.schemas import (
    AIFeedback,
    CustomSection,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    Resume,
    RewriteRequest,
    WebsiteEntry,
)
from app.domain.resume.session import SessionRegistry
from app.main import app


@pytest.fixture(autouse=True)
def disable_rate_limit():
    """테스트 중 rate limit 비활성화"""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def sample_resume() -> Resume:
    """테스트용 이력서 - 모든 식별 컬렉션에 토큰 부여됨"""
    return Resume(
        first_name="Jane",
        last_name="Doe",
        profession="Backend Engineer",
        email="jane@example.com",
        phone="010-1234-5678",
        summary="Backend engineer with 5 years of Python experience.",
        experience=[
            ExperienceEntry(
                id="e1",
                title="Backend Engineer",
                company="Acme",
                location="Seoul",
                dates="2021 - Present",
                responsibilities=["Built FastAPI services", "Ran PostgreSQL migrations"],
            ),
            ExperienceEntry(
                id="e2",
                title="Junior Developer",
                company="Initech",
                location="Busan",
                dates="2019 - 2021",
                responsibilities=["Maintained Django admin"],
            ),
        ],
        education=[
            EducationEntry(
                id="ed1",
                degree="B.S. Computer Science",
                school="KAIST",
                location="Daejeon",
                dates="2015 - 2019",
            )
        ],
        websites=[WebsiteEntry(id="w1", name="GitHub", url="https://github.com/janedoe")],
        projects=[
            ProjectEntry(
                id="p1",
                name="resume-kit",
                description="Resume tooling",
                technologies=["Python"],
            )
        ],
        custom_sections=[CustomSection(id="c1", title="Languages", content="Korean, English")],
        skills=["Python", "FastAPI"],
        achievements=["Hackathon winner"],
        hobbies=["Climbing"],
    )


@pytest.fixture
def sample_feedback() -> AIFeedback:
    """테스트용 AI 피드백"""
    return AIFeedback(
        score=82,
        justification="Most backend requirements are covered.",
        suggested_roles=["Platform Engineer"],
        skills_to_learn=["Kubernetes"],
    )


@pytest.fixture
def sample_rewrite_request() -> RewriteRequest:
    """테스트용 재작성 요청"""
    return RewriteRequest(query="Tailor my resume for a senior backend role")


@pytest.fixture
def sessions() -> SessionRegistry:
    """테스트 격리용 세션 레지스트리"""
    return SessionRegistry(max_count=10)


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_generator_client():
    """이력서 구조화/재작성용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_generator_client") as mock_get:
        mock_client = MagicMock()
        mock_get.return_value = mock_client
        yield mock_client


@pytest.fixture
def mock_evaluator_client():
    """이력서 피드백 평가용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_evaluator_client") as mock_get:
        mock_client = MagicMock()
        mock_get.return_value = mock_client
        yield mock_client


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("POST", "https://test.com"),
            response=httpx.Response(status_code, request=httpx.Request("POST", "https://test.com")),
        )

    return _create


@pytest.fixture
def mock_workflow():
    """LangGraph 워크플로우 mock"""
    workflow = MagicMock()
    workflow.ainvoke = AsyncMock()
    with patch("app.domain.resume.service.get_workflow", return_value=workflow):
        yield workflow
