# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Record operations namespace."""

from __future__ import annotations

import datetime as _dt
import logging
from typing import Any, List, Mapping, Optional, Union, TYPE_CHECKING

import pandas as pd

from ..core.results import PaginatedResponse, Response
from ..models.attachment import AttachmentRequestBuilder, UploadAttachmentOptions
from ..models.filters import Filter, FilterBuilder
from ..models.permission import Permission
from ..models.activity import UpdateLog
from ..models.record import DataLevel, DataRef, DataRefLevel, DataTemplate
from ..models.template_type import TemplateType
from ..utils._dates import format_timestamp
from ..utils._pandas import records_to_dataframe

if TYPE_CHECKING:
    from ..client import CrmClient

_LOGGER = logging.getLogger(__name__)

FilterLike = Union[Filter, Mapping[str, Any]]


class RecordOperations:
    """
    Record operations: search, create, update, status, attachments, permissions and comments.

    Accessed via ``client.records``. Every method sends one request and
    returns the unwrapped envelope; failures are raised unchanged.

    Example:
        Create a job from its template and move it to a new status::

            template = client.templates.get(TemplateType.Job, "Installation").data
            RecordAccessor(template).default_fields().set_value_by_label("Name", "Site A")
            ref = client.records.create(template).data

            client.records.update_status(TemplateType.Job, ref.ref_id, "Scheduled")

        Search with a filter::

            flt = Filter().where_dynamic("f_region", "eq", "North")
            page = client.records.search(TemplateType.Job, filter=flt)
            for row in page.data:
                print(row.seq_no, row.status)
    """

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def search(
        self,
        type: TemplateType,
        category: Optional[str] = None,
        filter: Optional[FilterLike] = None,
    ) -> PaginatedResponse[List[DataLevel]]:
        """
        Search records of a template type.

        :param type: Template type to search.
        :type type: TemplateType
        :param category: Optional category restriction.
        :type category: str | None
        :param filter: Optional filter. ``None`` omits the ``filter`` parameter;
            an empty :class:`~FieldOps.Crm.models.filters.Filter` sends ``"{}"``.
        :type filter: Filter | Mapping | None
        :return: One page of matching rows.
        :rtype: PaginatedResponse[list[DataLevel]]
        :raises ~FieldOps.Crm.core.errors.ValidationError: If the filter is malformed.
        """
        params = {
            "type": int(type),
            "filter": FilterBuilder.query_value(filter),
            "category": category or None,
        }
        payload = self._client._get_api()._call("get", "/search", params=params)
        return PaginatedResponse.from_payload(payload, lambda rows: [DataLevel.from_dict(r) for r in rows])

    def search_dataframe(
        self,
        type: TemplateType,
        category: Optional[str] = None,
        filter: Optional[FilterLike] = None,
        by_label: bool = True,
    ) -> pd.DataFrame:
        """
        Search records and return the page as a pandas DataFrame.

        Columns are the record attributes followed by one column per field,
        named by label (or by ``lbl_id`` when ``by_label`` is False).

        :rtype: pandas.DataFrame
        """
        page = self.search(type, category=category, filter=filter)
        return records_to_dataframe(page.data or [], by_label=by_label)

    def create(self, data: DataTemplate) -> Response[DataRef]:
        """
        Create a record.

        :param data: Filled-in template.
        :type data: DataTemplate
        :return: Response whose ``data`` is the new record's identity.
        :rtype: Response[DataRef]
        """
        payload = self._client._get_api()._call("post", "/data", json=data.to_payload())
        return Response.from_payload(payload, DataRef.from_dict)

    def update(self, type: TemplateType, data: DataRefLevel) -> Response[DataRef]:
        """
        Update a persisted record identified by ``data.ref_id``.

        Server-computed values (``seq_no``, status history) are not refreshed
        on ``data``; call :meth:`get` to observe them.

        :rtype: Response[DataRef]
        """
        payload = self._client._get_api()._call(
            "patch",
            "/data",
            params={"type": int(type), "ref_id": data.ref_id},
            json=data.to_payload(),
        )
        return Response.from_payload(payload, DataRef.from_dict)

    def update_status(
        self,
        type: TemplateType,
        ref_id: str,
        status: str,
        update_date: Optional[_dt.datetime] = None,
    ) -> bool:
        """
        Set a record's status.

        :param update_date: When the status changed. Defaults to now in the
            configured zone (``Asia/Kuala_Lumpur`` unless overridden), not the
            machine's local zone. An explicit datetime is sent as given.
        :type update_date: datetime.datetime | None
        :return: ``True`` once the backend accepted the change.
        :rtype: bool
        """
        api = self._client._get_api()
        params = {
            "type": int(type),
            "ref_id": ref_id,
            "update_date": format_timestamp(update_date, api.config.timezone),
        }
        payload = api._call("patch", "/data/status", params=params, json={"status": status})
        _LOGGER.debug("Status of %s set to %r: %s", ref_id, status, payload)
        return True

    def get_status_log(self, type: TemplateType, ref_id: str, status: str) -> Response[UpdateLog]:
        """
        Fetch when a record entered ``status``.

        :rtype: Response[UpdateLog]
        """
        payload = self._client._get_api()._call(
            "get",
            "/data/status/log",
            params={"type": int(type), "ref_id": ref_id, "status": status},
        )
        return Response.from_payload(payload, UpdateLog.from_dict)

    def list_status_logs(
        self,
        type: TemplateType,
        ref_id: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Response[List[UpdateLog]]:
        """
        Fetch the full status history of a record.

        :param page: Optional 1-based page number.
        :param limit: Optional page size.
        :rtype: Response[list[UpdateLog]]
        """
        payload = self._client._get_api()._call(
            "get",
            "/data/status/all-logs",
            params={"page": page, "limit": limit, "type": int(type), "ref_id": ref_id},
        )
        return Response.from_payload(payload, lambda rows: [UpdateLog.from_dict(r) for r in rows])

    def get(self, type: TemplateType, ref_id: str) -> Response[DataRefLevel]:
        """
        Fetch a persisted record.

        :rtype: Response[DataRefLevel]
        """
        payload = self._client._get_api()._call("get", "/data", params={"type": int(type), "ref_id": ref_id})
        return Response.from_payload(payload, DataRefLevel.from_dict)

    def get_attachments(self, type: TemplateType, ref_id: str) -> Response[DataRefLevel]:
        """
        Fetch a record with its attachment fields resolved.

        This is the only call served by the v2 API.

        :rtype: Response[DataRefLevel]
        """
        api = self._client._get_api()
        payload = api._call(
            "get",
            "/data/attachment",
            version=api.config.attachment_api_version,
            params={"type": int(type), "ref_id": ref_id},
        )
        return Response.from_payload(payload, DataRefLevel.from_dict)

    def upload_attachment(
        self,
        type: TemplateType,
        ref_id: str,
        attachment: UploadAttachmentOptions,
    ) -> Response[str]:
        """
        Upload a file, or attach a link, to a record field.

        The body is ``multipart/form-data`` for both variants.

        :param attachment: :class:`~FieldOps.Crm.models.attachment.FileAttachment` or
            :class:`~FieldOps.Crm.models.attachment.LinkAttachment`.
        :return: Response whose ``data`` is the stored attachment URL.
        :rtype: Response[str]
        """
        request = AttachmentRequestBuilder.build(type, ref_id, attachment)
        payload = self._client._get_api()._call("post", "/data/attachment", files=request.parts)
        return Response.from_payload(payload)

    def get_permissions(self, type: TemplateType, ref_id: str) -> Response[Permission]:
        """
        Fetch who a record is assigned to and who may view it.

        :rtype: Response[Permission]
        """
        payload = self._client._get_api()._call(
            "get", "/data/permission", params={"type": int(type), "ref_id": ref_id}
        )
        return Response.from_payload(payload, Permission.from_dict)

    def save_permissions(self, type: TemplateType, ref_id: str, permission: Permission) -> Response[bool]:
        """Replace a record's permissions."""
        payload = self._client._get_api()._call(
            "patch",
            "/data/permission",
            params={"type": int(type), "ref_id": ref_id},
            json=permission.to_dict(),
        )
        return Response.from_payload(payload)

    def add_comment(self, type: TemplateType, ref_id: str, content: str) -> Response[Any]:
        """Add a comment to a record's activity stream."""
        payload = self._client._get_api()._call(
            "post",
            "/add-comment",
            json={"type": int(type), "ref_id": ref_id, "content": content},
        )
        return Response.from_payload(payload)
