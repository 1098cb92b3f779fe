# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Record data models for FieldOps CRM data.

A record ("data") is a schema-flexible document with two independent field
groups: ``default_fields`` fixed by the record's template type, and
``dynamic_fields`` configured per tenant for a type and category. The two lists
are never merged, and ``lbl_id`` is unique within each of them.

:class:`RecordAccessor` wraps one record and exposes a
:class:`~FieldOps.Crm.models.field.FieldHelper` per group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .field import Field, FieldHelper
from .template_type import TemplateType

# Type aliases for semantic clarity
RefId = str  # server-assigned opaque identity
TemplateTypeLike = Union[TemplateType, int, str]


def _as_template_type(value: Any) -> TemplateTypeLike:
    """Coerce a wire ``type`` value to :class:`TemplateType` where it names one."""
    if isinstance(value, TemplateType):
        return value
    try:
        return TemplateType(int(value))
    except (TypeError, ValueError):
        return value


def _wire_type(value: TemplateTypeLike) -> Union[int, str]:
    return int(value) if isinstance(value, TemplateType) else value


def _fields(items: Optional[List[Any]]) -> List[Field]:
    return [f if isinstance(f, Field) else Field.from_dict(f) for f in items or []]


@dataclass
class SourceRef:
    """Backreference to the record this one originated from."""

    ref_id: RefId
    type: TemplateTypeLike

    def to_dict(self) -> Dict[str, Any]:
        return {"ref_id": self.ref_id, "type": _wire_type(self.type)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SourceRef":
        return cls(ref_id=str(data.get("ref_id", "")), type=_as_template_type(data.get("type")))


@dataclass
class ProductRef:
    """Product totals attached to a persisted record."""

    subtotal: Optional[float] = None
    tax: Optional[float] = None
    amount: Optional[float] = None
    currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProductRef":
        return cls(
            subtotal=data.get("subtotal"),
            tax=data.get("tax"),
            amount=data.get("amount"),
            currency=data.get("currency"),
        )


@dataclass
class DataRef:
    """Identity of a persisted record, returned by create and update."""

    ref_id: RefId
    type: TemplateTypeLike

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataRef":
        return cls(ref_id=str(data.get("ref_id", "")), type=_as_template_type(data.get("type")))


@dataclass
class DataTemplate:
    """
    A record as the client builds and submits it.

    :param type: Template category of the record.
    :type type: TemplateType | int | str
    :param default_fields: Schema-defined fields of ``type``.
    :type default_fields: list[Field]
    :param dynamic_fields: Tenant-configured fields of ``type`` and ``category``.
    :type dynamic_fields: list[Field]
    :param category: Template category name.
    :type category: str | None
    :param source: Originating record, if any.
    :type source: SourceRef | None

    Example::

        template = client.templates.get(TemplateType.Job, "Installation").data
        RecordAccessor(template).default_fields().set_value_by_label("Name", "Site A")
        ref = client.records.create(template).data
    """

    type: TemplateTypeLike
    default_fields: List[Field] = field(default_factory=list)
    dynamic_fields: List[Field] = field(default_factory=list)
    category: Optional[str] = None
    customer_id: Optional[Union[str, int]] = None
    deal_id: Optional[Union[str, int]] = None
    activity_id: Optional[Union[str, int]] = None
    source: Optional[SourceRef] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body for create/update requests; unset optional keys are omitted."""
        payload: Dict[str, Any] = {
            "type": _wire_type(self.type),
            "default_fields": [f.to_dict() for f in self.default_fields],
            "dynamic_fields": [f.to_dict() for f in self.dynamic_fields],
        }
        for key in ("category", "customer_id", "deal_id", "activity_id"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.source is not None:
            payload["source"] = self.source.to_dict()
        return payload

    @classmethod
    def _template_kwargs(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        source = data.get("source")
        return {
            "type": _as_template_type(data.get("type")),
            "default_fields": _fields(data.get("default_fields")),
            "dynamic_fields": _fields(data.get("dynamic_fields")),
            "category": data.get("category"),
            "customer_id": data.get("customer_id"),
            "deal_id": data.get("deal_id"),
            "activity_id": data.get("activity_id"),
            "source": SourceRef.from_dict(source) if isinstance(source, Mapping) else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataTemplate":
        return cls(**cls._template_kwargs(data))


@dataclass
class DataLevel(DataTemplate):
    """A search result row."""

    id: str = ""
    seq_no: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataLevel":
        return cls(
            **cls._template_kwargs(data),
            id=str(data.get("id", "")),
            seq_no=str(data.get("seq_no") or ""),
            status=data.get("status") or "",
        )


@dataclass
class DataRefLevel(DataTemplate):
    """
    A persisted record as the server returns it.

    ``ref_id`` is the only stable identity. ``seq_no`` is a display sequence
    computed by the server and must not be used to identify a record. After an
    update the caller re-fetches to observe server-computed values.
    """

    ref_id: RefId = ""
    seq_no: str = ""
    status: str = ""
    product: Optional[ProductRef] = None
    pdf_url: Optional[str] = None
    public_pdf_url: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["ref_id"] = self.ref_id
        for key in ("seq_no", "status", "pdf_url", "public_pdf_url"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        if self.product is not None:
            payload["product"] = self.product.to_dict()
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataRefLevel":
        product = data.get("product")
        return cls(
            **cls._template_kwargs(data),
            ref_id=str(data.get("ref_id", "")),
            seq_no=str(data.get("seq_no") or ""),
            status=data.get("status") or "",
            product=ProductRef.from_dict(product) if isinstance(product, Mapping) else None,
            pdf_url=data.get("pdf_url"),
            public_pdf_url=data.get("public_pdf_url"),
        )


class RecordAccessor:
    """
    Uniform editing surface over both field groups of one record.

    The accessor keeps a handle on the record it wraps (``ref``) and builds one
    :class:`FieldHelper` per group from the record's lists. Value changes made
    through a helper land in the record's own :class:`Field` objects. If a
    field list on the record is replaced wholesale afterwards, call
    :meth:`resync` to rebuild the helpers from the record's current lists.

    :param record: Record to wrap.
    :type record: DataTemplate

    Example::

        accessor = RecordAccessor(record)
        accessor.default_fields().set_value("f1", "B")
        accessor.dynamic_fields().get_value("f1")  # None unless defined there too

        record.dynamic_fields = fresh_fields
        accessor.resync()
    """

    def __init__(self, record: DataTemplate) -> None:
        self.ref = record
        self._default = FieldHelper(record.default_fields)
        self._dynamic = FieldHelper(record.dynamic_fields)

    def default_fields(self) -> FieldHelper:
        return self._default

    def dynamic_fields(self) -> FieldHelper:
        return self._dynamic

    def resync(self) -> "RecordAccessor":
        """Rebuild both helpers from the wrapped record's current field lists."""
        self._default = FieldHelper(self.ref.default_fields)
        self._dynamic = FieldHelper(self.ref.dynamic_fields)
        return self

    @property
    def is_stale(self) -> bool:
        """Whether a field list on the record was replaced since the last sync."""
        return (
            self._default.fields is not self.ref.default_fields
            or self._dynamic.fields is not self.ref.dynamic_fields
        )


__all__ = [
    "DataTemplate",
    "DataLevel",
    "DataRef",
    "DataRefLevel",
    "SourceRef",
    "ProductRef",
    "RecordAccessor",
    "RefId",
]
