# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Search filters and their wire serialization.

The backend takes a search filter as JSON text in the ``filter`` query
parameter. Field predicates are grouped by field group; flat top-level keys
constrain record attributes. Every key present is an additional AND
constraint: there is no OR composition.

Example::

    >>> FilterBuilder.serialize(Filter(name="Acme").where_default("f1", "eq", "A"))
    '{"default_fields":[{"lbl_id":"f1","operator":"eq","value":"A"}],"name":"Acme"}'
    >>> FilterBuilder.serialize(Filter())
    '{}'
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Union

from ..core._error_codes import (
    VALIDATION_FILTER_NOT_SERIALIZABLE,
    VALIDATION_MALFORMED_PREDICATE,
    VALIDATION_UNKNOWN_OPERATOR,
)
from ..core.errors import ValidationError
from .template_type import TemplateType


class SearchOperator(str, Enum):
    """Comparison operators accepted in field predicates, with their wire codes."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    GREATER_THAN = "gt"
    LESS_THAN_EQUAL = "lte"
    GREATER_THAN_EQUAL = "gte"

    @classmethod
    def coerce(cls, value: Union["SearchOperator", str]) -> "SearchOperator":
        """
        Return the operator for a member or wire code.

        :raises ~FieldOps.Crm.core.errors.ValidationError: If ``value`` is not one of
            ``eq``, ``ne``, ``lt``, ``gt``, ``lte``, ``gte``.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Unknown search operator {value!r}; expected one of {[op.value for op in cls]}",
                subcode=VALIDATION_UNKNOWN_OPERATOR,
                details={"operator": value},
            ) from None


@dataclass(frozen=True)
class FieldPredicate:
    """
    A single ``{lbl_id, operator, value}`` comparison against one field.

    :param lbl_id: Field identifier.
    :type lbl_id: str
    :param operator: Comparison operator (member or wire code).
    :type operator: SearchOperator | str
    :param value: Value to compare against.
    """

    lbl_id: str
    operator: SearchOperator
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.lbl_id, str) or not self.lbl_id:
            raise ValidationError(
                "Field predicate requires a non-empty string lbl_id",
                subcode=VALIDATION_MALFORMED_PREDICATE,
                details={"lbl_id": self.lbl_id},
            )
        object.__setattr__(self, "operator", SearchOperator.coerce(self.operator))

    def to_dict(self) -> Dict[str, Any]:
        return {"lbl_id": self.lbl_id, "operator": self.operator.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Any) -> "FieldPredicate":
        if not isinstance(data, Mapping) or not {"lbl_id", "operator", "value"} <= set(data):
            raise ValidationError(
                "Field predicate must be a mapping with lbl_id, operator and value",
                subcode=VALIDATION_MALFORMED_PREDICATE,
                details={"predicate": data},
            )
        return cls(lbl_id=data["lbl_id"], operator=data["operator"], value=data["value"])


@dataclass
class Filter:
    """
    Conjunctive search filter.

    Predicates keep the order they were added in; the backend may scan them in
    order. Top-level keys left as ``None`` are not sent. Keys the SDK does not
    model can be passed through ``extra``.

    Example::

        flt = (Filter(source_type=TemplateType.Deal)
               .where_default("f_amount", "gte", "1000")
               .where_dynamic("f_region", SearchOperator.EQUAL, "North"))
        page = client.records.search(TemplateType.Job, filter=flt)
    """

    default_fields: List[FieldPredicate] = field(default_factory=list)
    dynamic_fields: List[FieldPredicate] = field(default_factory=list)
    ref_id: Any = None
    name: Any = None
    source_type: Optional[Union[TemplateType, int]] = None
    source_id: Any = None
    seq_no: Optional[str] = None
    deal_seq_no: Optional[str] = None
    customer_seq_no: Optional[str] = None
    activity_seq_no: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _FLAT_KEYS: ClassVar[Tuple[str, ...]] = (
        "ref_id",
        "name",
        "source_type",
        "source_id",
        "seq_no",
        "deal_seq_no",
        "customer_seq_no",
        "activity_seq_no",
    )
    _GROUP_KEYS: ClassVar[Tuple[str, ...]] = ("default_fields", "dynamic_fields")

    def where_default(self, lbl_id: str, operator: Union[SearchOperator, str], value: Any) -> "Filter":
        self.default_fields.append(FieldPredicate(lbl_id, operator, value))
        return self

    def where_dynamic(self, lbl_id: str, operator: Union[SearchOperator, str], value: Any) -> "Filter":
        self.dynamic_fields.append(FieldPredicate(lbl_id, operator, value))
        return self

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        for key in self._GROUP_KEYS:
            predicates = getattr(self, key)
            if predicates:
                out[key] = [p.to_dict() for p in predicates]
        for key in self._FLAT_KEYS:
            value = getattr(self, key)
            if value is not None:
                out[key] = int(value) if isinstance(value, TemplateType) else value
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Filter":
        """
        Parse a filter mapping (e.g. the decoded ``filter`` parameter).

        :raises ~FieldOps.Crm.core.errors.ValidationError: If ``data`` is not a mapping or
            a predicate list is not a list of well-formed predicates.
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Filter must be a JSON object, got {type(data).__name__}",
                subcode=VALIDATION_MALFORMED_PREDICATE,
                details={"filter": data},
            )
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            if key in cls._GROUP_KEYS:
                if not isinstance(value, list):
                    raise ValidationError(
                        f"{key} must be a list of predicates",
                        subcode=VALIDATION_MALFORMED_PREDICATE,
                        details={key: value},
                    )
                kwargs[key] = [p if isinstance(p, FieldPredicate) else FieldPredicate.from_dict(p) for p in value]
            elif key in cls._FLAT_KEYS:
                kwargs[key] = value
            else:
                extra[key] = value
        if isinstance(kwargs.get("source_type"), int):
            try:
                kwargs["source_type"] = TemplateType(kwargs["source_type"])
            except ValueError:
                pass
        return cls(extra=extra, **kwargs)


class FilterBuilder:
    """
    Serializes :class:`Filter` values into the ``filter`` query parameter.

    The output is compact JSON (no whitespace, non-ASCII kept as-is), the same
    text a browser ``JSON.stringify`` produces for the backend.
    """

    @staticmethod
    def serialize(flt: Union[Filter, Mapping[str, Any]]) -> str:
        """
        Serialize a filter to JSON text.

        An empty filter serializes to ``"{}"``.

        :param flt: Filter object, or a mapping that is validated through :meth:`Filter.from_dict`.
        :type flt: Filter | Mapping
        :return: JSON text.
        :rtype: str
        :raises ~FieldOps.Crm.core.errors.ValidationError: If the filter is malformed or
            holds values that are not JSON-serializable.
        """
        if not isinstance(flt, Filter):
            flt = Filter.from_dict(flt)
        try:
            return json.dumps(flt.to_dict(), separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Filter is not JSON-serializable: {exc}",
                subcode=VALIDATION_FILTER_NOT_SERIALIZABLE,
            ) from exc

    @classmethod
    def query_value(cls, flt: Optional[Union[Filter, Mapping[str, Any]]]) -> Optional[str]:
        """
        Return the ``filter`` parameter value, or ``None`` to omit the parameter.

        Only an absent filter omits the parameter; an empty filter is still
        sent as ``"{}"``.
        """
        if flt is None:
            return None
        return cls.serialize(flt)

    @staticmethod
    def parse(text: str) -> Filter:
        """Parse serialized filter text back into a :class:`Filter`."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ValidationError(
                f"Filter text is not valid JSON: {exc}",
                subcode=VALIDATION_MALFORMED_PREDICATE,
            ) from exc
        return Filter.from_dict(data)


__all__ = ["SearchOperator", "FieldPredicate", "Filter", "FilterBuilder"]
