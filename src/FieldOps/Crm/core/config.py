# Copyright (c) FieldOps.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..common.constants import API_VERSION_V1, API_VERSION_V2, DEFAULT_TIMEZONE


@dataclass(frozen=True)
class CrmConfig:
    """
    Configuration settings for FieldOps CRM client operations.

    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param timezone: IANA zone used when a status-update timestamp is generated
        on the caller's behalf. Default is ``"Asia/Kuala_Lumpur"``.
    :type timezone: str
    :param api_version: Version segment for regular endpoints (default: ``"v1"``).
    :type api_version: str
    :param attachment_api_version: Version segment for attachment reads (default: ``"v2"``).
    :type attachment_api_version: str
    """

    http_timeout: Optional[float] = None
    timezone: str = DEFAULT_TIMEZONE
    api_version: str = API_VERSION_V1
    attachment_api_version: str = API_VERSION_V2

    @classmethod
    def from_env(cls) -> "CrmConfig":
        """
        Create a configuration instance from optional environment overrides.

        Reads ``FIELDOPS_CRM_HTTP_TIMEOUT`` and ``FIELDOPS_CRM_TIMEZONE``; any
        variable that is unset keeps its default.

        :return: Configuration instance.
        :rtype: ~FieldOps.Crm.core.config.CrmConfig
        :raises ValueError: If ``FIELDOPS_CRM_HTTP_TIMEOUT`` is not a number.
        """
        timeout_raw = os.environ.get("FIELDOPS_CRM_HTTP_TIMEOUT")
        return cls(
            http_timeout=float(timeout_raw) if timeout_raw else None,  # None: per-method defaults in _HttpClient
            timezone=os.environ.get("FIELDOPS_CRM_TIMEZONE") or DEFAULT_TIMEZONE,
        )
