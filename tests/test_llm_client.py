"""LLM 클라이언트 테스트"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.domain.resume.schemas import AIFeedback, ExperienceEntry, Resume
from app.infra.llm.client import (
    evaluate_resume,
    format_reference_documents,
    format_resume_json,
    rewrite_resume,
    structure_resume,
)
from app.infra.llm.factory import get_evaluator_client, get_generator_client, reset_clients
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.vllm_client import VLLMClient


class TestFormatReferenceDocuments:
    """format_reference_documents 함수 테스트"""

    def test_format_empty(self):
        assert format_reference_documents([]) == "없음"

    def test_format_multiple(self):
        result = format_reference_documents(["Job A", "Job B"])

        assert "### Reference 1/2" in result
        assert "### Reference 2/2" in result
        assert "Job A" in result
        assert "---" in result

    def test_truncates_long_reference(self):
        with patch("app.infra.llm.client.settings") as mock_settings:
            mock_settings.reference_max_length_prompt = 5
            result = format_reference_documents(["abcdefghij"])

        assert "abcde" in result
        assert "abcdef" not in result


class TestFormatResumeJson:
    """format_resume_json 함수 테스트"""

    def test_camel_case_with_ids(self, sample_resume):
        result = format_resume_json(sample_resume)

        assert '"firstName": "Jane"' in result
        assert '"id": "e1"' in result
        assert "customSections" in result

    def test_omits_none_values(self):
        result = format_resume_json(Resume(experience=[ExperienceEntry(title="Dev")]))

        assert '"id"' not in result
        assert "profession" not in result


class TestStructureResume:
    """structure_resume 함수 테스트"""

    @pytest.mark.asyncio
    async def test_structure_resume(self, mock_generator_client):
        expected = Resume(first_name="Jane", experience=[ExperienceEntry(title="Dev")])
        mock_generator_client.with_structured_output.return_value.ainvoke = AsyncMock(
            return_value=expected
        )

        result = await structure_resume("Jane Doe\nDev at Acme")

        assert result == expected
        mock_generator_client.with_structured_output.assert_called_once_with(Resume)
        messages = mock_generator_client.with_structured_output.return_value.ainvoke.call_args[0][0]
        assert "Dev at Acme" in messages[1].content


class TestRewriteResume:
    """rewrite_resume 함수 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reference_texts,expected_fragment",
        [
            (None, "Current Resume Data"),
            (["Senior SRE job description"], "Senior SRE job description"),
        ],
        ids=["query_only", "with_reference"],
    )
    async def test_rewrite_resume(
        self, mock_generator_client, sample_resume, reference_texts, expected_fragment
    ):
        mock_generator_client.with_structured_output.return_value.ainvoke = AsyncMock(
            return_value=sample_resume
        )

        result = await rewrite_resume(
            resume=sample_resume,
            query="Make it concise",
            reference_texts=reference_texts,
            session_id="session-1",
        )

        assert result == sample_resume
        ainvoke = mock_generator_client.with_structured_output.return_value.ainvoke
        messages = ainvoke.call_args[0][0]
        assert "Jane Doe" in messages[0].content
        assert expected_fragment in messages[1].content
        assert '"id": "e1"' in messages[1].content
        config = ainvoke.call_args.kwargs["config"]
        assert config["metadata"]["langfuse_session_id"] == "session-1"


class TestEvaluateResume:
    """evaluate_resume 함수 테스트"""

    @pytest.mark.asyncio
    async def test_evaluate_resume(self, mock_evaluator_client, sample_resume, sample_feedback):
        mock_evaluator_client.with_structured_output.return_value.ainvoke = AsyncMock(
            return_value=sample_feedback
        )

        result = await evaluate_resume(
            resume=sample_resume,
            query="Fit for platform role?",
            reference_texts=["Platform engineer JD"],
        )

        assert result.score == 82
        mock_evaluator_client.with_structured_output.assert_called_once_with(AIFeedback)


class TestFactory:
    """LLM 클라이언트 팩토리 테스트"""

    @pytest.fixture(autouse=True)
    def reset(self):
        reset_clients()
        yield
        reset_clients()

    @pytest.fixture
    def mock_provider(self):
        """생성 프로바이더 클래스 mock"""
        mock_class = MagicMock()
        with patch.dict("app.infra.llm.factory.GENERATOR_PROVIDERS", {"openai": mock_class}):
            yield mock_class

    def test_unknown_provider_raises(self):
        with patch("app.infra.llm.factory.settings") as mock_settings:
            mock_settings.llm_provider = "unknown"
            with pytest.raises(ValueError):
                get_generator_client()

    def test_generator_client_is_cached(self, mock_provider):
        with patch("app.infra.llm.factory.settings") as mock_settings:
            mock_settings.llm_provider = "openai"
            mock_settings.generator_temperature = 0.2
            first = get_generator_client()
            second = get_generator_client()

        assert first is second
        mock_provider.assert_called_once_with(temperature=0.2)

    def test_evaluator_uses_gemini_when_key_set(self):
        with (
            patch("app.infra.llm.factory.settings") as mock_settings,
            patch("app.infra.llm.factory.GeminiClient") as mock_gemini,
        ):
            mock_settings.gemini_api_key = "key"
            mock_settings.evaluator_temperature = 0.0
            client = get_evaluator_client()

        assert client is mock_gemini.return_value
        mock_gemini.assert_called_once_with(temperature=0.0)

    def test_evaluator_falls_back_to_generator_provider_in_development(self, mock_provider):
        with patch("app.infra.llm.factory.settings") as mock_settings:
            mock_settings.llm_provider = "openai"
            mock_settings.gemini_api_key = ""
            mock_settings.is_production = False
            mock_settings.evaluator_temperature = 0.0
            client = get_evaluator_client()

        assert client is mock_provider.return_value
        mock_provider.assert_called_once_with(temperature=0.0)

    def test_evaluator_requires_gemini_key_in_production(self):
        with patch("app.infra.llm.factory.settings") as mock_settings:
            mock_settings.gemini_api_key = ""
            mock_settings.is_production = True
            with pytest.raises(ValueError):
                get_evaluator_client()


class TestProviderClients:
    """프로바이더 클라이언트 설정 검증 테스트"""

    @pytest.mark.parametrize(
        "client_class,key_field",
        [
            (OpenAIClient, "openai_api_key"),
            (VLLMClient, "vllm_api_url"),
            (GeminiClient, "gemini_api_key"),
        ],
        ids=["openai", "vllm", "gemini"],
    )
    def test_missing_required_setting_raises(self, client_class, key_field):
        module = client_class.__module__
        with patch(f"{module}.settings") as mock_settings:
            setattr(mock_settings, key_field, "")
            with pytest.raises(ValueError):
                client_class(temperature=0.0)

    def test_openai_uses_role_temperature(self):
        with (
            patch("app.infra.llm.openai_client.settings") as mock_settings,
            patch("app.infra.llm.openai_client.ChatOpenAI") as mock_chat,
        ):
            mock_settings.openai_api_key = "sk-test"
            client = OpenAIClient(temperature=0.0)

        assert client.get_chat_model() is mock_chat.return_value
        assert mock_chat.call_args.kwargs["temperature"] == 0.0

    def test_structured_output_method(self):
        with (
            patch("app.infra.llm.vllm_client.settings") as mock_settings,
            patch("app.infra.llm.vllm_client.ChatOpenAI") as mock_chat,
        ):
            mock_settings.vllm_api_url = "http://vllm:8000/v1"
            client = VLLMClient(temperature=0.2)
            client.with_structured_output(AIFeedback)

        mock_chat.return_value.with_structured_output.assert_called_once_with(
            AIFeedback, method="json_schema"
        )
