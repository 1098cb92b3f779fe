# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Structured exceptions raised by the FieldOps CRM SDK.

Every failure is surfaced to the caller unchanged: the SDK never retries and
never substitutes a default result for a failed call. Each exception carries a
stable ``code`` (the exception family) and an optional ``subcode`` from
:mod:`FieldOps.Crm.core._error_codes`.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, List, Optional, Tuple

_SERIALIZED_ATTRS: Tuple[str, ...] = (
    "message",
    "code",
    "subcode",
    "status_code",
    "details",
    "source",
    "is_transient",
    "timestamp",
)


def _utc_stamp() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")


class CrmError(Exception):
    """
    Base class of every SDK error.

    :param message: Human-readable description.
    :param code: Error family: ``validation_error``, ``transport_error`` or ``http_error``.
    :param subcode: Finer classification, e.g. ``http_404``.
    :param status_code: HTTP status, when a response was received.
    :param details: Extra context such as ``url``, ``method`` or backend ``errors``.
    :param source: ``"client"`` or ``"server"``.
    :param is_transient: Whether repeating the call later might succeed.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: str = "client",
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details: Dict[str, Any] = dict(details) if details else {}
        self.source = source
        self.is_transient = is_transient
        self.timestamp = _utc_stamp()

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a JSON-friendly mapping."""
        return {name: getattr(self, name) for name in _SERIALIZED_ATTRS}

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}({self.code!r}, {self.subcode!r}, {self.message!r})"


class ValidationError(CrmError):
    """Caller-contract violation detected before a request is built."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details)


class TransportError(CrmError):
    """No response was received: connection failure or timeout."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="transport_error", subcode=subcode, details=details)


class HttpError(CrmError):
    """
    Backend-reported failure: a non-2xx status, a body that is not JSON, or an
    ``error`` array in a 2xx envelope.

    The keyword context (``url``, ``method``, ``body_excerpt``, ``retry_after``,
    ``errors``) is stored in :attr:`details` when given.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        retry_after: Optional[int] = None,
        errors: Optional[List[Any]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = {
            "url": url,
            "method": method,
            "body_excerpt": body_excerpt,
            "retry_after": retry_after,
            "errors": errors,
        }
        merged = dict(details or {})
        merged.update((key, value) for key, value in context.items() if value is not None)
        super().__init__(
            message,
            code="http_error",
            subcode=subcode,
            status_code=status_code,
            details=merged,
            source="server",
            is_transient=is_transient,
        )

    @property
    def errors(self) -> List[Any]:
        """Backend error entries from the envelope; empty for status failures."""
        return list(self.details.get("errors") or [])


__all__ = ["CrmError", "HttpError", "TransportError", "ValidationError"]
