# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Timestamp formatting for request parameters."""

from __future__ import annotations

import datetime as _dt
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.constants import DEFAULT_TIMEZONE, TIMESTAMP_FORMAT


def now_in(timezone: str = DEFAULT_TIMEZONE) -> _dt.datetime:
    """Return the current time as an aware datetime in ``timezone``."""
    return _dt.datetime.now(ZoneInfo(timezone))


def format_timestamp(instant: Optional[_dt.datetime] = None, timezone: str = DEFAULT_TIMEZONE) -> str:
    """
    Render ``YYYY-MM-DD HH:MM:SS`` for a request parameter.

    Without ``instant`` the current time in ``timezone`` is used, regardless of
    the machine's local zone. An explicit instant is rendered as given, in its
    own zone.

    :param instant: Time to render, or ``None`` for now.
    :type instant: datetime.datetime | None
    :param timezone: IANA zone name used when ``instant`` is ``None``.
    :type timezone: str
    :rtype: str
    """
    if instant is None:
        instant = now_in(timezone)
    return instant.strftime(TIMESTAMP_FORMAT)
