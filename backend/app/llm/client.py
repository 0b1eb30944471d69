# app/llm/client.py


import uuid
import json
import logging
from typing import Any, Sequence

from app.core.config import settings
from app.llm.errors import LLMError, LLMNonRetryableError
from app.llm.prompts.registry import get_prompt
from app.llm.telemetry import LLMCallLog, log_llm_call, now_ms
from app.llm.types import InlineDocument, LLMRequest, LLMResponse
from app.llm.providers.gemini import GeminiProvider

logger = logging.getLogger("llm")


def _render_template(template: str, variables: dict) -> str:
    out = template
    for k, v in variables.items():
        out = out.replace("{{" + k + "}}", str(v))
    return out


def llm_generate(
    *,
    purpose: str,
    prompt_name: str,
    prompt_version: str,
    variables: dict,
    documents: Sequence[InlineDocument] = (),
    response_mime_type: str | None = "application/json",
    provider: GeminiProvider | None = None,
) -> LLMResponse:
    """
    One provider call, at most once. No retry/backoff: a failure is terminal
    and is raised to the caller as an LLMError subclass.
    """
    trace_id = str(uuid.uuid4())

    req = LLMRequest(
        trace_id=trace_id,
        purpose=purpose,
        prompt_name=prompt_name,
        prompt_version=prompt_version,
        variables=dict(variables),
        provider="gemini",
        model=settings.GEMINI_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
        timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
        response_mime_type=response_mime_type,
        documents=tuple(documents),
    )

    tmpl = get_prompt(prompt_name, prompt_version)
    rendered = _render_template(tmpl.template, req.variables)
    if settings.LLM_LOG_PROMPTS:
        logger.info("llm_prompt trace_id=%s prompt=%s", trace_id, rendered)

    client = provider or GeminiProvider()
    start_ms = now_ms()

    try:
        resp = client.generate(req, rendered)
    except LLMError as e:
        _log(req, start_ms, ok=False, error_type=type(e).__name__)
        raise

    _log(req, start_ms, ok=True)
    return resp


def llm_generate_json(
    *,
    purpose: str,
    prompt_name: str,
    prompt_version: str,
    variables: dict,
    documents: Sequence[InlineDocument] = (),
    provider: GeminiProvider | None = None,
) -> dict[str, Any]:
    """Call the provider in JSON mode and decode the output into a dict."""
    resp = llm_generate(
        purpose=purpose,
        prompt_name=prompt_name,
        prompt_version=prompt_version,
        variables=variables,
        documents=documents,
        response_mime_type="application/json",
        provider=provider,
    )

    if not resp.output_text:
        raise LLMNonRetryableError("No response from Gemini API")

    try:
        data = json.loads(resp.output_text)
    except json.JSONDecodeError as e:
        raise LLMNonRetryableError(f"Gemini returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise LLMNonRetryableError(f"Gemini returned JSON {type(data).__name__}, expected object")
    return data


def _log(req: LLMRequest, start_ms: int, *, ok: bool, error_type: str | None = None) -> None:
    log_llm_call(
        LLMCallLog(
            trace_id=req.trace_id,
            provider=req.provider,
            model=req.model,
            purpose=req.purpose,
            prompt_name=req.prompt_name,
            prompt_version=req.prompt_version,
            latency_ms=(now_ms() - start_ms),
            ok=ok,
            documents=len(req.documents),
            error_type=error_type,
        )
    )
