from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    """이력서 적합도 평가 전용"""

    structured_output_method = "json_schema"

    def _create_chat_model(self) -> ChatGoogleGenerativeAI:
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY가 설정되지 않았습니다")

        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=settings.gemini_api_key,
            timeout=settings.gemini_timeout,
            temperature=self.temperature,
            max_retries=settings.llm_max_retries,
        )

    def get_model_name(self) -> str:
        return settings.gemini_model
