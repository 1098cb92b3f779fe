# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Record permission models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

__all__ = ["PermissionStruct", "Permission"]


@dataclass
class PermissionStruct:
    """
    Users and departments granted one kind of access.

    :param user: User identifiers.
    :type user: list[str]
    :param department: Department identifiers.
    :type department: list[str]
    """

    user: List[str] = field(default_factory=list)
    department: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"user": list(self.user), "department": list(self.department)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PermissionStruct":
        return cls(user=list(data.get("user") or []), department=list(data.get("department") or []))


@dataclass
class Permission:
    """
    Access control of a record: who it is assigned to and who may view it.

    Example::

        perm = client.records.get_permissions(TemplateType.Deal, ref_id).data
        perm.view.department.append("sales")
        client.records.save_permissions(TemplateType.Deal, ref_id, perm)
    """

    assign: PermissionStruct = field(default_factory=PermissionStruct)
    view: PermissionStruct = field(default_factory=PermissionStruct)

    def to_dict(self) -> Dict[str, Any]:
        return {"assign": self.assign.to_dict(), "view": self.view.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Permission":
        return cls(
            assign=PermissionStruct.from_dict(data.get("assign") or {}),
            view=PermissionStruct.from_dict(data.get("view") or {}),
        )
