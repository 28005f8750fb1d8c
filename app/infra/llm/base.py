from abc import ABC, abstractmethod
from typing import TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseLLMClient(ABC):
    """LangChain 채팅 모델 래퍼

    같은 프로바이더라도 생성/평가 역할마다 temperature가 다르므로 역할별로 인스턴스를 만든다.
    """

    # with_structured_output 방식 - 프로바이더별로 재정의
    structured_output_method: str = "function_calling"

    def __init__(self, temperature: float):
        self.temperature = temperature
        self._model = self._create_chat_model()

    @abstractmethod
    def _create_chat_model(self) -> BaseChatModel:
        """설정 검증 후 채팅 모델 생성. 필수 설정이 없으면 ValueError"""

    @abstractmethod
    def get_model_name(self) -> str:
        pass

    def get_chat_model(self) -> BaseChatModel:
        return self._model

    def with_structured_output(self, schema: type[T]) -> Runnable:
        """pydantic 객체로 검증된 응답을 돌려주는 Runnable 반환"""
        return self._model.with_structured_output(schema, method=self.structured_output_method)
