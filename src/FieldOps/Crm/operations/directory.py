# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Tenant directory operations namespace."""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..core.results import Response

if TYPE_CHECKING:
    from ..client import CrmClient


class DirectoryOperations:
    """Users and departments of the tenant, as referenced by permissions. Accessed via ``client.directory``."""

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def get_users(self) -> Response[List[str]]:
        return Response.from_payload(self._client._get_api()._call("get", "/users"))

    def get_departments(self) -> Response[List[str]]:
        return Response.from_payload(self._client._get_api()._call("get", "/departments"))
