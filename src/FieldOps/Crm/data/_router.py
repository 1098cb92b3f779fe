# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""URL resolution and authentication headers for the FieldOps CRM Web API."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..common.constants import API_VERSION_V1, HEADER_API_KEY, HEADER_API_SECRET


class _RequestRouter:
    """
    Resolves ``(path, version)`` pairs against a base URL and builds request headers.

    ``url`` joins base, version and path with exactly one ``/`` between each, so
    ``"https://api.example.com"`` + ``"/data"`` and ``"https://api.example.com/"``
    + ``"data"`` resolve identically.

    :param base_url: Service root, with or without a trailing slash.
    :param api_key: Value of the ``key`` header.
    :param api_secret: Value of the ``secret`` header.
    """

    def __init__(self, base_url: str, api_key: str, api_secret: str) -> None:
        self.base_url = base_url
        self._api_key = api_key
        self._api_secret = api_secret

    def url(self, path: str, version: str = API_VERSION_V1) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        if path.startswith("/"):
            path = path[1:]
        return f"{base}{version}/{path}"

    def headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Return authentication headers with ``extra`` merged over them (caller values win)."""
        headers = {
            HEADER_API_KEY: self._api_key,
            HEADER_API_SECRET: self._api_secret,
        }
        if extra:
            headers.update(extra)
        return headers
