# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Asset and product catalog models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .field import Field
from .record import TemplateTypeLike, _as_template_type, _fields, _wire_type

__all__ = ["Asset", "BaseLocation", "BaseProduct", "CatalogProduct", "AttachProduct", "AttachedProduct"]


@dataclass
class Asset:
    """An asset that can be attached to a record."""

    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Asset":
        return cls(id=str(data.get("id", "")), name=data.get("name") or "")


@dataclass
class BaseLocation:
    """A record a product moves from or to."""

    id: str
    type: TemplateTypeLike

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaseLocation":
        return cls(id=str(data.get("id", "")), type=_as_template_type(data.get("type")))


@dataclass
class BaseProduct:
    """
    A product line.

    :param added: Backend flag set when the product is attached to the record.
    :type added: int
    """

    id: str
    name: str = ""
    added: int = 0
    quantity: float = 0
    unit_price: float = 0
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "added": self.added,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "notes": self.notes,
        }

    @classmethod
    def _base_kwargs(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "id": str(data.get("id", "")),
            "name": data.get("name") or "",
            "added": data.get("added") or 0,
            "quantity": data.get("quantity") or 0,
            "unit_price": data.get("unit_price") or 0,
            "notes": data.get("notes") or "",
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaseProduct":
        return cls(**cls._base_kwargs(data))


@dataclass
class CatalogProduct(BaseProduct):
    """A product as listed in the catalog, with its units of measure."""

    uom_list: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogProduct":
        return cls(**cls._base_kwargs(data), uom_list=list(data.get("uom_list") or []))


@dataclass
class AttachProduct(BaseProduct):
    """A product line to attach to a record, with its dynamic fields."""

    uom_name: Optional[str] = None
    dynamic_fields: List[Field] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        if self.uom_name is not None:
            out["uom_name"] = self.uom_name
        out["dynamic_fields"] = [f.to_dict() for f in self.dynamic_fields]
        return out

    @classmethod
    def _attach_kwargs(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            **cls._base_kwargs(data),
            "uom_name": data.get("uom_name"),
            "dynamic_fields": _fields(data.get("dynamic_fields")),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttachProduct":
        return cls(**cls._attach_kwargs(data))


@dataclass
class AttachedProduct(AttachProduct):
    """A product line already attached to a record, with computed totals."""

    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    from_location: Optional[BaseLocation] = None
    to_location: Optional[BaseLocation] = None

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        for key in ("subtotal", "tax", "total"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.from_location is not None:
            out["from"] = {"id": self.from_location.id, "type": _wire_type(self.from_location.type)}
        if self.to_location is not None:
            out["to"] = {"id": self.to_location.id, "type": _wire_type(self.to_location.type)}
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttachedProduct":
        src = data.get("from")
        dst = data.get("to")
        return cls(
            **cls._attach_kwargs(data),
            subtotal=data.get("subtotal"),
            tax=data.get("tax"),
            total=data.get("total"),
            from_location=BaseLocation.from_dict(src) if isinstance(src, Mapping) else None,
            to_location=BaseLocation.from_dict(dst) if isinstance(dst, Mapping) else None,
        )
