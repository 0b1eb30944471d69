from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.llm.errors import LLMNonRetryableError, LLMRetryableError
from app.llm.providers.gemini import GeminiProvider
from app.llm.types import InlineDocument, LLMRequest


def _req(documents=()):
    return LLMRequest(
        trace_id="t-1",
        purpose="analyze_pdf",
        prompt_name="analyze_pdf",
        prompt_version="v1",
        variables={},
        provider="gemini",
        model="gemini-2.5-pro",
        temperature=0.2,
        max_output_tokens=1024,
        timeout_seconds=30,
        response_mime_type="application/json",
        documents=tuple(documents),
    )


def _sdk_response(text):
    resp = MagicMock()
    resp.text = text
    resp.usage_metadata.prompt_token_count = 10
    resp.usage_metadata.candidates_token_count = 5
    return resp


class TestGeminiProvider:
    def test_sends_document_part_before_prompt(self) -> None:
        sdk = MagicMock()
        sdk.models.generate_content.return_value = _sdk_response(' {"ok": true} ')
        with patch("app.llm.providers.gemini.genai.Client", return_value=sdk):
            resp = GeminiProvider(api_key="k").generate(
                _req([InlineDocument(data=b"%PDF", mime_type="application/pdf")]), "PROMPT"
            )

        kwargs = sdk.models.generate_content.call_args.kwargs
        contents = kwargs["contents"]
        assert contents[-1] == "PROMPT"
        assert contents[0].inline_data.mime_type == "application/pdf"
        assert contents[0].inline_data.data == b"%PDF"
        assert kwargs["model"] == "gemini-2.5-pro"
        assert kwargs["config"].response_mime_type == "application/json"
        assert resp.output_text == '{"ok": true}'
        assert resp.input_tokens == 10
        assert resp.output_tokens == 5

    def test_text_only_request_sends_prompt_alone(self) -> None:
        sdk = MagicMock()
        sdk.models.generate_content.return_value = _sdk_response("{}")
        with patch("app.llm.providers.gemini.genai.Client", return_value=sdk):
            GeminiProvider(api_key="k").generate(_req(), "PROMPT")
        assert sdk.models.generate_content.call_args.kwargs["contents"] == ["PROMPT"]

    def test_missing_api_key_is_non_retryable(self, monkeypatch) -> None:
        monkeypatch.setattr("app.llm.providers.gemini.settings.GEMINI_API_KEY", None)
        with pytest.raises(LLMNonRetryableError, match="GEMINI_API_KEY"):
            GeminiProvider().generate(_req(), "PROMPT")

    def test_timeout_is_retryable(self) -> None:
        sdk = MagicMock()
        sdk.models.generate_content.side_effect = httpx.ReadTimeout("slow")
        with patch("app.llm.providers.gemini.genai.Client", return_value=sdk):
            with pytest.raises(LLMRetryableError, match="timed out"):
                GeminiProvider(api_key="k").generate(_req(), "PROMPT")

    def test_quota_error_is_retryable(self) -> None:
        sdk = MagicMock()
        sdk.models.generate_content.side_effect = RuntimeError("429 RESOURCE_EXHAUSTED quota")
        with patch("app.llm.providers.gemini.genai.Client", return_value=sdk):
            with pytest.raises(LLMRetryableError):
                GeminiProvider(api_key="k").generate(_req(), "PROMPT")

    def test_bad_request_is_non_retryable(self) -> None:
        sdk = MagicMock()
        sdk.models.generate_content.side_effect = ValueError("invalid argument")
        with patch("app.llm.providers.gemini.genai.Client", return_value=sdk):
            with pytest.raises(LLMNonRetryableError):
                GeminiProvider(api_key="k").generate(_req(), "PROMPT")
