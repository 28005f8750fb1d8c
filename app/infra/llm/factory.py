"""역할별 LLM 클라이언트 팩토리.

생성(구조화/재작성)은 llm_provider 설정을 따르고, 평가는 Gemini를 쓴다.
Gemini 키가 없는 개발 환경에서는 생성 프로바이더를 평가용 temperature로 하나 더 만든다.
"""

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.vllm_client import VLLMClient

logger = get_logger(__name__)

GENERATOR_PROVIDERS: dict[str, type[BaseLLMClient]] = {
    "openai": OpenAIClient,
    "vllm": VLLMClient,
}

_clients: dict[str, BaseLLMClient] = {}


def _generator_class() -> type[BaseLLMClient]:
    provider = settings.llm_provider
    client_class = GENERATOR_PROVIDERS.get(provider)
    if client_class is None:
        raise ValueError(f"지원하지 않는 LLM 프로바이더: {provider}")
    return client_class


def get_generator_client() -> BaseLLMClient:
    """이력서 구조화/재작성용 클라이언트"""
    if "generator" not in _clients:
        client = _generator_class()(temperature=settings.generator_temperature)
        logger.info(
            "생성 클라이언트 초기화 provider=%s model=%s",
            settings.llm_provider,
            client.get_model_name(),
        )
        _clients["generator"] = client
    return _clients["generator"]


def get_evaluator_client() -> BaseLLMClient:
    """이력서 피드백 평가용 클라이언트"""
    if "evaluator" in _clients:
        return _clients["evaluator"]

    if settings.gemini_api_key:
        client = GeminiClient(temperature=settings.evaluator_temperature)
    elif not settings.is_production:
        logger.warning("GEMINI_API_KEY 없음, 생성 프로바이더로 평가 provider=%s", settings.llm_provider)
        client = _generator_class()(temperature=settings.evaluator_temperature)
    else:
        raise ValueError("GEMINI_API_KEY가 설정되지 않았습니다")

    logger.info("평가 클라이언트 초기화 model=%s", client.get_model_name())
    _clients["evaluator"] = client
    return client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    _clients.clear()
