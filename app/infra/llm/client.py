import os

from langchain_core.messages import HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.logging import get_logger
from app.domain.resume.prompts import (
    RESUME_FEEDBACK_HUMAN,
    RESUME_FEEDBACK_SYSTEM,
    RESUME_REWRITER_HUMAN,
    RESUME_REWRITER_REFERENCE_HUMAN,
    RESUME_REWRITER_SYSTEM,
    RESUME_STRUCTURER_HUMAN,
    RESUME_STRUCTURER_SYSTEM,
)
from app.domain.resume.schemas import AIFeedback, Resume
from app.infra.llm.factory import get_evaluator_client, get_generator_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def _build_config(session_id: str | None, tags: list[str]) -> dict:
    langfuse_handler = get_langfuse_handler()
    return {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": ["resume", *tags],
        },
    }


def format_reference_documents(reference_texts: list[str]) -> str:
    """참고 문서를 프롬프트용 텍스트로 포맷"""
    if not reference_texts:
        return "없음"

    lines = []
    total = len(reference_texts)

    for idx, text in enumerate(reference_texts, start=1):
        if idx > 1:
            lines.append("")
            lines.append("---")
            lines.append("")

        content = text.strip()[: settings.reference_max_length_prompt]
        lines.append(f"### Reference {idx}/{total}")
        lines.append(f'"""\n{content}\n"""')

    return "\n".join(lines)


def format_resume_json(resume: Resume) -> str:
    """이력서를 프롬프트용 camelCase JSON으로 직렬화"""
    return resume.model_dump_json(by_alias=True, exclude_none=True, indent=2)


async def structure_resume(resume_text: str, session_id: str | None = None) -> Resume:
    """비정형 이력서 텍스트를 구조화된 이력서로 변환"""
    logger.debug("이력서 구조화 요청 length=%d", len(resume_text))

    text = resume_text[: settings.resume_text_max_length]
    llm = get_generator_client().with_structured_output(Resume)
    messages = [
        SystemMessage(content=RESUME_STRUCTURER_SYSTEM),
        HumanMessage(content=RESUME_STRUCTURER_HUMAN.format(resume_text=text)),
    ]
    result = await llm.ainvoke(messages, config=_build_config(session_id, ["structure"]))

    logger.debug(
        "이력서 구조화 완료 experience=%d education=%d",
        len(result.experience),
        len(result.education),
    )
    return result


async def rewrite_resume(
    resume: Resume,
    query: str,
    reference_texts: list[str] | None = None,
    session_id: str | None = None,
) -> Resume:
    """사용자 요청에 맞춰 이력서 전체를 재작성"""
    logger.debug(
        "이력서 재작성 요청 query_length=%d references=%d",
        len(query),
        len(reference_texts or []),
    )

    resume_json = format_resume_json(resume)
    if reference_texts:
        human_content = RESUME_REWRITER_REFERENCE_HUMAN.format(
            query=query,
            reference_documents=format_reference_documents(reference_texts),
            resume_json=resume_json,
        )
        tags = ["rewrite", "reference"]
    else:
        human_content = RESUME_REWRITER_HUMAN.format(query=query, resume_json=resume_json)
        tags = ["rewrite"]

    llm = get_generator_client().with_structured_output(Resume)
    messages = [
        SystemMessage(content=RESUME_REWRITER_SYSTEM.format(full_name=resume.full_name or "unknown")),
        HumanMessage(content=human_content),
    ]
    result = await llm.ainvoke(messages, config=_build_config(session_id, tags))

    logger.debug("이력서 재작성 완료 experience=%d", len(result.experience))
    return result


async def evaluate_resume(
    resume: Resume,
    query: str,
    reference_texts: list[str],
    session_id: str | None = None,
) -> AIFeedback:
    """요청 및 참고 문서 대비 이력서 적합도 평가"""
    logger.debug("이력서 평가 요청 references=%d", len(reference_texts))

    human_content = RESUME_FEEDBACK_HUMAN.format(
        query=query,
        reference_documents=format_reference_documents(reference_texts),
        resume_json=format_resume_json(resume),
    )

    llm = get_evaluator_client().with_structured_output(AIFeedback)
    messages = [
        SystemMessage(content=RESUME_FEEDBACK_SYSTEM),
        HumanMessage(content=human_content),
    ]
    result = await llm.ainvoke(messages, config=_build_config(session_id, ["evaluate"]))

    logger.debug("이력서 평가 완료 score=%d", result.score)
    return result
