# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Field data model and the field-collection helper.

A record carries two ordered field lists, ``default_fields`` and
``dynamic_fields``. Dynamic fields are configured per tenant, so client code
cannot address them as attributes; :class:`FieldHelper` indexes a field list by
``lbl_id`` or by human label instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, List, Mapping, Optional, Union

# Values the backend returns: a string, or a list of typed values
# (usually record-like mappings for table and attachment fields).
FieldValue = Union[str, List[Any], None]


@dataclass
class Field:
    """
    A single named, typed value slot of a record.

    Identity is ``lbl_id``. ``label`` is a secondary lookup key whose uniqueness
    is not enforced. ``lbl_id``, ``label`` and ``type`` are read-only once the
    field exists; ``value`` may be replaced in place.

    :param lbl_id: Field identifier.
    :type lbl_id: str
    :param label: Human-readable field name.
    :type label: str
    :param type: Backend field type tag (e.g. ``"text"``, ``"table"``, ``"file"``).
    :type type: str
    :param value: Field value.
    :type value: str | list | None

    Example::

        f = Field(lbl_id="f1", label="Name", type="text", value="A")
        f.value = "B"        # allowed
        f.lbl_id = "f2"      # AttributeError
    """

    lbl_id: str
    label: str = ""
    type: str = ""
    value: FieldValue = None

    _READ_ONLY: ClassVar[FrozenSet[str]] = frozenset({"lbl_id", "label", "type"})

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._READ_ONLY and name in self.__dict__:
            raise AttributeError(f"Field.{name} is read-only")
        object.__setattr__(self, name, value)

    def to_dict(self) -> Dict[str, Any]:
        return {"lbl_id": self.lbl_id, "label": self.label, "type": self.type, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Field":
        value = data.get("value")
        if isinstance(value, tuple):
            value = list(value)
        return cls(
            lbl_id=str(data.get("lbl_id", "")),
            label=data.get("label") or "",
            type=data.get("type") or "",
            value=value,
        )


class FieldHelper:
    """
    Lookup and mutation by identifier or label over one ordered field list.

    The helper works on the list it was given: setting a value changes the
    :class:`Field` inside that list, so the change is visible through the
    record that owns it. Lookups scan linearly and return the first match;
    field lists are small.

    Absence is never an error. ``get_*`` return ``None`` when nothing matches
    and ``set_*`` silently do nothing, because which fields exist is decided by
    the tenant's schema on the server. The helper never adds a field.

    :param fields: Field list to index.
    :type fields: list[Field]

    Example::

        helper = FieldHelper(record.default_fields)
        helper.set_value("f1", "B").set_value_by_label("Phone", "555-0100")
        print(helper.get_value("f1"))  # "B"
        print(helper.get_value("missing"))  # None
    """

    def __init__(self, fields: List[Field]) -> None:
        self.fields = fields

    def get_field(self, lbl_id: str) -> Optional[Field]:
        for f in self.fields:
            if f.lbl_id == lbl_id:
                return f
        return None

    def get_field_by_label(self, label: str) -> Optional[Field]:
        for f in self.fields:
            if f.label == label:
                return f
        return None

    def get_value(self, lbl_id: str) -> FieldValue:
        field = self.get_field(lbl_id)
        return field.value if field is not None else None

    def get_value_by_label(self, label: str) -> FieldValue:
        field = self.get_field_by_label(label)
        return field.value if field is not None else None

    def set_value(self, lbl_id: str, value: FieldValue) -> "FieldHelper":
        field = self.get_field(lbl_id)
        if field is not None:
            field.value = value
        return self

    def set_value_by_label(self, label: str, value: FieldValue) -> "FieldHelper":
        field = self.get_field_by_label(label)
        if field is not None:
            field.value = value
        return self

    def lbl_ids(self) -> List[str]:
        """Return field identifiers in list order."""
        return [f.lbl_id for f in self.fields]

    def to_dict(self) -> Dict[str, FieldValue]:
        """Return a ``lbl_id -> value`` mapping (first occurrence wins)."""
        out: Dict[str, FieldValue] = {}
        for f in self.fields:
            out.setdefault(f.lbl_id, f.value)
        return out

    def __contains__(self, lbl_id: object) -> bool:
        return any(f.lbl_id == lbl_id for f in self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


__all__ = ["Field", "FieldHelper", "FieldValue"]
