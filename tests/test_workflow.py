"""재작성 워크플로우 노드 함수 테스트"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.core.exceptions import ErrorCode
from app.domain.resume.prompts import NO_REFERENCE_JUSTIFICATION
from app.domain.resume.schemas import Resume, RewriteRequest, RewriteState
from app.domain.resume.workflow import (
    create_rewrite_workflow,
    evaluate_node,
    rewrite_node,
    should_evaluate,
)

HTTP_500 = httpx.HTTPStatusError(
    "Server Error",
    request=httpx.Request("POST", "test"),
    response=httpx.Response(500, request=httpx.Request("POST", "test")),
)


class TestRewriteNode:
    """rewrite_node 함수 테스트"""

    @pytest.fixture
    def rewrite_state(self, sample_resume, sample_rewrite_request) -> RewriteState:
        """재작성 노드용 상태"""
        return RewriteState(
            request=sample_rewrite_request,
            resume=sample_resume,
            session_id="test-session-123",
        )

    @pytest.mark.asyncio
    async def test_rewrite_success(self, rewrite_state, sample_resume):
        rewritten = sample_resume.model_copy(update={"summary": "Senior backend engineer."})

        with patch(
            "app.domain.resume.workflow.rewrite_resume",
            new_callable=AsyncMock,
            return_value=rewritten,
        ) as mock_rewrite:
            result = await rewrite_node(rewrite_state)

        assert result["rewritten"] == rewritten
        assert "error_code" not in result
        assert mock_rewrite.call_args.kwargs["session_id"] == "test-session-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error,expected_code,expected_msg_part",
        [
            (HTTP_500, ErrorCode.LLM_API_ERROR, "HTTP 500"),
            (ValueError("Invalid format"), ErrorCode.REWRITE_VALIDATION_ERROR, "검증 오류"),
            (KeyError("experience"), ErrorCode.REWRITE_PARSE_ERROR, "데이터 오류"),
        ],
        ids=["llm_api_error", "validation_error", "parse_error"],
    )
    async def test_rewrite_errors(self, rewrite_state, error, expected_code, expected_msg_part):
        with patch(
            "app.domain.resume.workflow.rewrite_resume",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            result = await rewrite_node(rewrite_state)

        assert result["error_code"] == expected_code
        assert expected_msg_part in result["error_message"]
        assert "rewritten" not in result


class TestEvaluateNode:
    """evaluate_node 함수 테스트"""

    @pytest.fixture
    def evaluate_state(self, sample_resume) -> RewriteState:
        return RewriteState(
            request=RewriteRequest(query="Fit for SRE?", reference_texts=["SRE JD"]),
            resume=sample_resume,
            rewritten=sample_resume,
        )

    @pytest.mark.asyncio
    async def test_without_references_uses_placeholder(self, sample_resume):
        state = RewriteState(
            request=RewriteRequest(query="Shorten it"),
            resume=sample_resume,
            rewritten=sample_resume,
        )

        with patch(
            "app.domain.resume.workflow.evaluate_resume", new_callable=AsyncMock
        ) as mock_evaluate:
            result = await evaluate_node(state)

        mock_evaluate.assert_not_called()
        assert result["feedback"].score == 0
        assert result["feedback"].justification == NO_REFERENCE_JUSTIFICATION

    @pytest.mark.asyncio
    async def test_with_references(self, evaluate_state, sample_feedback):
        with patch(
            "app.domain.resume.workflow.evaluate_resume",
            new_callable=AsyncMock,
            return_value=sample_feedback,
        ):
            result = await evaluate_node(evaluate_state)

        assert result["feedback"] == sample_feedback

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [HTTP_500, ValueError("Parse error")],
        ids=["http_error", "value_error"],
    )
    async def test_evaluate_error_degrades_to_placeholder(self, evaluate_state, error):
        """평가 실패는 재작성을 막지 않음"""
        with patch(
            "app.domain.resume.workflow.evaluate_resume",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            result = await evaluate_node(evaluate_state)

        assert result["feedback"].score == 0
        assert "error_code" not in result


class TestConditionFunctions:
    """조건 함수 테스트"""

    @pytest.mark.parametrize(
        "error_code,expected",
        [
            (ErrorCode.LLM_API_ERROR, "end"),
            (None, "evaluate"),
        ],
        ids=["with_error", "no_error"],
    )
    def test_should_evaluate(self, sample_rewrite_request, error_code, expected):
        state = RewriteState(request=sample_rewrite_request, error_code=error_code)

        assert should_evaluate(state) == expected


class TestRewriteWorkflow:
    """컴파일된 워크플로우 테스트"""

    @pytest.mark.asyncio
    async def test_full_run(self, sample_resume, sample_rewrite_request):
        rewritten = sample_resume.model_copy(update={"summary": "Rewritten"})

        with patch(
            "app.domain.resume.workflow.rewrite_resume",
            new_callable=AsyncMock,
            return_value=rewritten,
        ):
            workflow = create_rewrite_workflow()
            result = await workflow.ainvoke(
                RewriteState(request=sample_rewrite_request, resume=sample_resume)
            )

        assert result["rewritten"].summary == "Rewritten"
        assert result["feedback"].score == 0

    @pytest.mark.asyncio
    async def test_error_skips_evaluation(self, sample_rewrite_request):
        with (
            patch(
                "app.domain.resume.workflow.rewrite_resume",
                new_callable=AsyncMock,
                side_effect=ValueError("bad output"),
            ),
            patch(
                "app.domain.resume.workflow.evaluate_resume", new_callable=AsyncMock
            ) as mock_evaluate,
        ):
            workflow = create_rewrite_workflow()
            result = await workflow.ainvoke(
                RewriteState(request=sample_rewrite_request, resume=Resume())
            )

        assert result["error_code"] == ErrorCode.REWRITE_VALIDATION_ERROR
        assert "feedback" not in result
        mock_evaluate.assert_not_called()
