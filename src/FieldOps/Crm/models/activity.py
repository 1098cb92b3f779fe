# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Status history and job travel models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

__all__ = ["UpdateLog", "CheckInOut"]

Coordinate = Union[float, str]


@dataclass
class UpdateLog:
    """
    One entry of a record's status history.

    :param datetime: Time the status was set, as reported by the server.
    :type datetime: str
    :param name: Status name; present in the all-statuses log.
    :type name: str | None
    """

    datetime: str
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UpdateLog":
        return cls(datetime=data.get("datetime") or "", name=data.get("name"))


@dataclass
class CheckInOut:
    """
    A check-in, check-out or travelling entry recorded against a job.

    :param type: ``"Check-In"``, ``"Check-Out"`` or ``"Travelling"``.
    :type type: str
    :param gps: ``[latitude, longitude]``, or ``None`` when no fix was recorded.
    :type gps: list | None
    :param travel_distance: Distance travelled for the entry.
    :type travel_distance: float
    """

    type: str
    name: str = ""
    datetime: str = ""
    start_time: str = ""
    end_time: str = ""
    travel_distance: float = 0.0
    gps: Optional[List[Coordinate]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckInOut":
        gps = data.get("gps")
        return cls(
            type=data.get("type") or "",
            name=data.get("name") or "",
            datetime=data.get("datetime") or "",
            start_time=data.get("start_time") or "",
            end_time=data.get("end_time") or "",
            travel_distance=float(data.get("travel_distance") or 0),
            gps=list(gps) if gps is not None else None,
        )
