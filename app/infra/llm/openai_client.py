from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient


class OpenAIClient(BaseLLMClient):
    """OpenAI API - 개발/테스트 환경 기본 프로바이더"""

    def _create_chat_model(self) -> ChatOpenAI:
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY가 설정되지 않았습니다")

        return ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            temperature=self.temperature,
            max_retries=settings.llm_max_retries,
        )

    def get_model_name(self) -> str:
        return settings.openai_model
