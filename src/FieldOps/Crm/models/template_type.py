# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Record kind and field group enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Optional

__all__ = ["TemplateType", "FieldGroup", "to_template_type"]


class TemplateType(IntEnum):
    """
    Template category: the backend's enumeration of record kinds.

    ``DF01`` to ``DF07`` are tenant-configurable data forms and ``PF`` is the
    public form. The integer value is what travels on the wire.
    """

    Customer = 1
    Deal = 2
    Job = 3
    Asset = 4
    Product = 5
    DF01 = 6
    DF02 = 7
    DF03 = 8
    DF04 = 9
    DF05 = 10
    DF06 = 11
    DF07 = 12
    PF = 13


class FieldGroup(str, Enum):
    """Field group a field belongs to, sent as the attachment ``field_type`` part."""

    DEFAULT = "default"
    DYNAMIC = "dynamic"


# Record-type names used by backend webhooks
_WEBHOOK_TYPES: Dict[str, TemplateType] = {
    "customer": TemplateType.Customer,
    "deal": TemplateType.Deal,
    "activity": TemplateType.Asset,
    "asset": TemplateType.Asset,
    "product": TemplateType.Product,
    "DR01": TemplateType.DF01,
    "DR02": TemplateType.DF02,
    "DR03": TemplateType.DF03,
    "DR04": TemplateType.DF04,
    "DR05": TemplateType.DF05,
    "DR06": TemplateType.DF06,
    "DR07": TemplateType.DF07,
    "public_form": TemplateType.PF,
}


def to_template_type(name: str) -> Optional[TemplateType]:
    """
    Resolve a webhook record-type name to a :class:`TemplateType`.

    Names are case-sensitive (``"DR01"``, ``"customer"``). Note that the
    backend reports jobs as ``"activity"``, which it files under the asset
    template.

    :param name: Record-type name from a webhook payload.
    :type name: str
    :return: The matching template type, or ``None`` for an unknown name.
    :rtype: TemplateType | None

    Example::

        >>> to_template_type("DR03")
        <TemplateType.DF03: 8>
        >>> to_template_type("unknown") is None
        True
    """
    return _WEBHOOK_TYPES.get(name)
