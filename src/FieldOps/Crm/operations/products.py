# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Product operations namespace."""

from __future__ import annotations

from typing import List, Optional, Sequence, TYPE_CHECKING

from ..core.results import PaginatedResponse, TemplateResponse
from ..models.catalog import AttachedProduct, AttachProduct, CatalogProduct
from ..models.filters import Filter, FilterBuilder
from ..models.template_type import TemplateType

if TYPE_CHECKING:
    from ..client import CrmClient


class ProductOperations:
    """
    Product catalog and product lines attached to records.

    Accessed via ``client.products``.

    Example::

        catalog = client.products.list(name="Cable").data
        attached = client.products.get_attached(TemplateType.Deal, deal_ref)
        lines = [AttachProduct(id=p.id, name=p.name, quantity=2, unit_price=p.unit_price) for p in catalog]
        client.products.attach(TemplateType.Deal, deal_ref, lines)
    """

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def list(self, name: Optional[str] = None, page: Optional[int] = None) -> PaginatedResponse[List[CatalogProduct]]:
        """
        List catalog products.

        :param name: Optional product-name filter, sent as ``{"name": ...}``.
        :param page: Optional 1-based page number.
        :rtype: PaginatedResponse[list[CatalogProduct]]
        """
        flt = Filter(name=name) if name is not None else None
        params = {"page": page, "filter": FilterBuilder.query_value(flt)}
        payload = self._client._get_api()._call("get", "/product", params=params)
        return PaginatedResponse.from_payload(payload, lambda rows: [CatalogProduct.from_dict(r) for r in rows])

    def get_attached(self, type: TemplateType, ref_id: str) -> TemplateResponse[List[AttachedProduct]]:
        """
        List the product lines attached to a record.

        The envelope's ``dynamic_fields_templates`` describes the dynamic fields
        every product line carries.

        :rtype: TemplateResponse[list[AttachedProduct]]
        """
        payload = self._client._get_api()._call(
            "get", "/product-attached", params={"type": int(type), "ref_id": ref_id}
        )
        return TemplateResponse.from_payload(payload, lambda rows: [AttachedProduct.from_dict(r) for r in rows])

    def attach(self, type: TemplateType, ref_id: str, products: Sequence[AttachProduct]) -> bool:
        """
        Attach product lines to a record.

        :return: ``True`` once the backend accepted the lines.
        :rtype: bool
        """
        self._client._get_api()._call(
            "post",
            "/add-product",
            json={"type": int(type), "ref_id": ref_id, "data": [p.to_dict() for p in products]},
        )
        return True
