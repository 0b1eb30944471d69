"""
Request context helpers.

We keep a small context (request_id, document_name) in ContextVars.
The HTTP middleware and the document service set these values so logs
for a single upload become correlatable.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_document_name: ContextVar[Optional[str]] = ContextVar("document_name", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    document_name: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if document_name is not None:
        _document_name.set(document_name)


def clear_context() -> None:
    _request_id.set(None)
    _document_name.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    doc = _document_name.get()

    if rid:
        ctx["request_id"] = rid
    if doc:
        ctx["document_name"] = doc
    return ctx
