# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Template metadata operations namespace."""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..core.results import Response
from ..models.record import DataTemplate
from ..models.template_type import TemplateType

if TYPE_CHECKING:
    from ..client import CrmClient


class TemplateOperations:
    """
    Template metadata: categories, statuses and blank record templates.

    Accessed via ``client.templates``.

    Example::

        categories = client.templates.get_categories(TemplateType.Job).data
        template = client.templates.get(TemplateType.Job, categories[0]).data
        for f in template.dynamic_fields:
            print(f.lbl_id, f.label, f.type)
    """

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def get_categories(self, type: TemplateType) -> Response[List[str]]:
        """
        List the categories configured for a template type.

        :param type: Template type.
        :type type: TemplateType
        :return: Response whose ``data`` is the list of category names.
        :rtype: Response[list[str]]
        """
        payload = self._client._get_api()._call("get", "/category", params={"type": int(type)})
        return Response.from_payload(payload)

    def get_statuses(self, type: TemplateType, category: str) -> Response[List[str]]:
        """
        List the statuses a record of ``type`` and ``category`` can take.

        :rtype: Response[list[str]]
        """
        payload = self._client._get_api()._call(
            "get", "/status", params={"type": int(type), "category": category}
        )
        return Response.from_payload(payload)

    def get(self, type: TemplateType, category: str) -> Response[DataTemplate]:
        """
        Fetch the blank record template of a type and category.

        The template carries the default and dynamic field definitions the
        tenant has configured; fill it through
        :class:`~FieldOps.Crm.models.record.RecordAccessor` and submit it with
        :meth:`~FieldOps.Crm.operations.records.RecordOperations.create`.

        :rtype: Response[DataTemplate]
        """
        payload = self._client._get_api()._call(
            "get", "/template", params={"type": int(type), "category": category}
        )
        return Response.from_payload(payload, DataTemplate.from_dict)
