# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Response envelopes returned by FieldOps CRM SDK operations.

The backend wraps every payload in one of three JSON envelopes:

- :class:`Response`: ``{data, error?}``
- :class:`PaginatedResponse`: ``{data, current_page, per_page, last_page, total, error?}``
- :class:`TemplateResponse`: ``{data, error?, dynamic_fields_templates}``

Each envelope is parsed once by the operation that received it; ``data`` is
converted to the operation's model type through the ``parse`` callable.

Example::

    page = client.records.search(TemplateType.Job)
    print(page.total, page.current_page, page.last_page)
    for row in page.data:
        print(row.seq_no)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..models.field import Field

T = TypeVar("T")


def _parse_data(payload: Dict[str, Any], parse: Optional[Callable[[Any], Any]]) -> Any:
    data = payload.get("data")
    if parse is None or data is None:
        return data
    return parse(data)


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    Plain response envelope.

    :param data: Operation payload, already converted to the operation's model type.
    :type data: T
    :param error: Backend error list. Always empty or ``None`` on a returned
        response: envelopes carrying errors are raised as
        :class:`~FieldOps.Crm.core.errors.HttpError` instead.
    :type error: :class:`list` | None
    """

    data: T
    error: Optional[List[Any]] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], parse: Optional[Callable[[Any], Any]] = None) -> "Response[T]":
        return cls(data=_parse_data(payload, parse), error=payload.get("error"))


@dataclass(frozen=True)
class PaginatedResponse(Response[T]):
    """
    Paginated response envelope.

    :param current_page: 1-based page number of ``data``.
    :type current_page: :class:`int`
    :param per_page: Page size used by the backend.
    :type per_page: :class:`int`
    :param last_page: Number of the final page.
    :type last_page: :class:`int`
    :param total: Total number of rows across all pages.
    :type total: :class:`int`
    """

    current_page: int = 0
    per_page: int = 0
    last_page: int = 0
    total: int = 0

    @property
    def has_more(self) -> bool:
        """Whether a page exists after this one."""
        return self.current_page < self.last_page

    @classmethod
    def from_payload(
        cls, payload: Dict[str, Any], parse: Optional[Callable[[Any], Any]] = None
    ) -> "PaginatedResponse[T]":
        return cls(
            data=_parse_data(payload, parse),
            error=payload.get("error"),
            current_page=int(payload.get("current_page") or 0),
            per_page=int(payload.get("per_page") or 0),
            last_page=int(payload.get("last_page") or 0),
            total=int(payload.get("total") or 0),
        )


@dataclass(frozen=True)
class TemplateResponse(Response[T]):
    """
    Response envelope that also carries the dynamic-field template of its rows.

    Returned by the attached-products endpoint, where each product row carries
    dynamic fields whose definitions are listed once in ``dynamic_fields_templates``.
    """

    dynamic_fields_templates: List[Field] = field(default_factory=list)

    @classmethod
    def from_payload(
        cls, payload: Dict[str, Any], parse: Optional[Callable[[Any], Any]] = None
    ) -> "TemplateResponse[T]":
        return cls(
            data=_parse_data(payload, parse),
            error=payload.get("error"),
            dynamic_fields_templates=[Field.from_dict(f) for f in payload.get("dynamic_fields_templates") or []],
        )


__all__ = ["Response", "PaginatedResponse", "TemplateResponse"]
