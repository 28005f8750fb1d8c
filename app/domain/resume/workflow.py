from typing import Literal

import httpx
from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from app.core.exceptions import ErrorCode
from app.core.logging import get_logger
from app.domain.resume.prompts import NO_REFERENCE_JUSTIFICATION
from app.domain.resume.schemas import AIFeedback, RewriteState
from app.infra.llm.client import evaluate_resume, rewrite_resume

logger = get_logger(__name__)


def placeholder_feedback() -> AIFeedback:
    """참고 문서 없이 재작성했을 때의 기본 피드백"""
    return AIFeedback(score=0, justification=NO_REFERENCE_JUSTIFICATION)


async def rewrite_node(state: RewriteState) -> RewriteState:
    """재작성 노드: 사용자 요청에 맞춰 이력서 전체 재작성"""
    request = state["request"]
    logger.info(
        "rewrite_node 시작 references=%d",
        len(request.reference_texts),
    )

    try:
        rewritten = await rewrite_resume(
            resume=state["resume"],
            query=request.query,
            reference_texts=request.reference_texts,
            session_id=state.get("session_id"),
        )

        logger.info("rewrite_node 완료 experience=%d", len(rewritten.experience))
        return {**state, "rewritten": rewritten}

    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("rewrite_node LLM API 오류 status=%d", status_code)
        return {
            **state,
            "error_code": ErrorCode.LLM_API_ERROR,
            "error_message": f"LLM API 오류: HTTP {status_code}",
        }

    except ValueError as e:
        logger.error("rewrite_node 검증 오류 error=%s", e)
        return {
            **state,
            "error_code": ErrorCode.REWRITE_VALIDATION_ERROR,
            "error_message": f"재작성 결과 검증 오류: {e}",
        }

    except (KeyError, TypeError) as e:
        logger.error("rewrite_node 데이터 오류 error=%s", e, exc_info=True)
        return {
            **state,
            "error_code": ErrorCode.REWRITE_PARSE_ERROR,
            "error_message": f"재작성 중 데이터 오류: {e}",
        }


async def evaluate_node(state: RewriteState) -> RewriteState:
    """피드백 노드: 참고 문서가 있을 때만 적합도 평가"""
    request = state["request"]

    if not request.reference_texts:
        logger.info("evaluate_node 참고 문서 없음, 기본 피드백 사용")
        return {**state, "feedback": placeholder_feedback()}

    logger.info("evaluate_node 시작")

    try:
        feedback = await evaluate_resume(
            resume=state["rewritten"],
            query=request.query,
            reference_texts=request.reference_texts,
            session_id=state.get("session_id"),
        )

        logger.info("evaluate_node 완료 score=%d", feedback.score)
        return {**state, "feedback": feedback}

    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning("evaluate_node LLM API 오류, 평가 건너뜀 status=%d", status_code)
        return {**state, "feedback": placeholder_feedback()}

    except (ValueError, KeyError, TypeError) as e:
        logger.warning("evaluate_node 데이터 오류, 평가 건너뜀 error=%s", e)
        return {**state, "feedback": placeholder_feedback()}


def should_evaluate(state: RewriteState) -> Literal["evaluate", "end"]:
    """에러 상태 확인: 에러 있으면 종료, 없으면 평가 노드로"""
    if state.get("error_code"):
        logger.info("should_evaluate: 에러 발생, 종료")
        return "end"
    return "evaluate"


def create_rewrite_workflow() -> CompiledStateGraph:
    """이력서 재작성 워크플로우 생성"""
    workflow = StateGraph(RewriteState)

    workflow.add_node("rewrite", rewrite_node)
    workflow.add_node("evaluate", evaluate_node)

    workflow.set_entry_point("rewrite")

    workflow.add_conditional_edges(
        "rewrite",
        should_evaluate,
        {
            "evaluate": "evaluate",
            "end": END,
        },
    )
    workflow.add_edge("evaluate", END)

    return workflow.compile()
