# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Job travel operations namespace."""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..core.results import Response
from ..models.activity import CheckInOut
from ..models.template_type import TemplateType
from ..utils._dates import format_timestamp

if TYPE_CHECKING:
    from ..client import CrmClient


class JobOperations:
    """
    Check-in, check-out and travel data of jobs.

    Accessed via ``client.jobs``. All calls target :attr:`TemplateType.Job` records.
    """

    def __init__(self, client: "CrmClient") -> None:
        self._client = client

    def get_travel_list(
        self,
        ref_id: str,
        start: Optional[_dt.datetime] = None,
        end: Optional[_dt.datetime] = None,
    ) -> Response[List[CheckInOut]]:
        """
        List the check-in/out and travelling entries of a job.

        :param start: Optional lower bound, sent as ``YYYY-MM-DD HH:MM:SS`` in its own zone.
        :param end: Optional upper bound, formatted the same way.
        :rtype: Response[list[CheckInOut]]
        """
        params: Dict[str, Any] = {"type": int(TemplateType.Job), "ref_id": ref_id}
        if start is not None:
            params["start"] = format_timestamp(start)
        if end is not None:
            params["end"] = format_timestamp(end)
        payload = self._client._get_api()._call("get", "/data/checkin", params=params)
        return Response.from_payload(payload, lambda rows: [CheckInOut.from_dict(r) for r in rows])

    def get_mileage(self, ref_id: str) -> Response[Dict[str, Any]]:
        """
        Fetch the travelled mileage and duration of a job.

        :rtype: Response[dict]
        """
        payload = self._client._get_api()._call(
            "get", "/data/travel", params={"type": int(TemplateType.Job), "ref_id": ref_id}
        )
        return Response.from_payload(payload)
