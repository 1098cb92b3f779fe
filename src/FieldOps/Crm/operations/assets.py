# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Asset operations namespace."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union, TYPE_CHECKING

from ..core.results import PaginatedResponse, Response
from ..models.catalog import Asset
from ..models.filters import Filter, FilterBuilder
from ..models.template_type import TemplateType

if TYPE_CHECKING:
    from ..client import CrmClient


class AssetOperations:
    """
    Assets and their attachment to records.

    Accessed via ``client.assets``.

    Example::

        page = client.assets.list(type=TemplateType.Job, ref_id=job_ref)
        ids = [a.id for a in page.data]
        client.assets.sync_attached(TemplateType.Job, job_ref, ids + [new_asset_id])
    """

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def list(
        self,
        type: Optional[TemplateType] = None,
        ref_id: Optional[str] = None,
        filter: Optional[Union[Filter, Mapping[str, Any]]] = None,
        page: Optional[int] = None,
    ) -> PaginatedResponse[List[Asset]]:
        """
        List assets, optionally those attached to one record.

        :param type: Template type of the record to scope to.
        :param ref_id: Record to scope to.
        :param filter: Optional filter; ``None`` omits the parameter.
        :param page: Optional 1-based page number.
        :rtype: PaginatedResponse[list[Asset]]
        """
        params = {
            "type": int(type) if type is not None else None,
            "ref_id": ref_id,
            "filter": FilterBuilder.query_value(filter),
            "page": page,
        }
        payload = self._client._get_api()._call("get", "/asset", params=params)
        return PaginatedResponse.from_payload(payload, lambda rows: [Asset.from_dict(r) for r in rows])

    def get_mapping(self, type: TemplateType, asset_id: str) -> Response[List[str]]:
        """
        List the records of ``type`` an asset is attached to.

        :rtype: Response[list[str]]
        """
        payload = self._client._get_api()._call(
            "get", "/asset-mapping", params={"type": int(type), "asset_id": asset_id}
        )
        return Response.from_payload(payload)

    def sync_attached(self, type: TemplateType, ref_id: str, assets: Sequence[str]) -> Response[bool]:
        """
        Replace the set of assets attached to a record.

        :param assets: Asset identifiers; assets not listed are detached.
        :rtype: Response[bool]
        """
        payload = self._client._get_api()._call(
            "patch",
            "/asset-attach-list",
            json={"type": int(type), "ref_id": ref_id, "assets": list(assets)},
        )
        return Response.from_payload(payload)
