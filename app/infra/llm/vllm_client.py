from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient


class VLLMClient(BaseLLMClient):
    """운영용 vLLM 서버 (OpenAI 호환 엔드포인트)

    guided decoding으로 이력서 스키마를 강제하기 위해 json_schema 방식을 쓴다.
    """

    structured_output_method = "json_schema"

    def _create_chat_model(self) -> ChatOpenAI:
        if not settings.vllm_api_url:
            raise ValueError("VLLM_API_URL이 설정되지 않았습니다")

        return ChatOpenAI(
            model=settings.vllm_model,
            api_key=settings.vllm_api_key or "EMPTY",
            base_url=settings.vllm_api_url,
            timeout=settings.vllm_timeout,
            temperature=self.temperature,
            max_retries=settings.llm_max_retries,
        )

    def get_model_name(self) -> str:
        return settings.vllm_model
