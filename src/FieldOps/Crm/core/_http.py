# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Single-attempt HTTP transport on top of ``requests``.

:class:`_HttpClient` picks a timeout for each call and sends it either through a
pooled :class:`requests.Session` or through ``requests.request``. A failed call
is never repeated; ``requests`` exceptions reach the caller as raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

# Seconds; uploads and deletes get the long budget
_LONG_TIMEOUT = 120
_SHORT_TIMEOUT = 10
_LONG_METHODS = frozenset({"post", "delete"})


def _method_timeout(method: str) -> int:
    return _LONG_TIMEOUT if (method or "").lower() in _LONG_METHODS else _SHORT_TIMEOUT


class _HttpClient:
    """
    Sends one request per call.

    :param timeout: Timeout in seconds applied to every call. ``None`` selects
        120 s for POST and DELETE and 10 s for other methods.
    :type timeout: :class:`float` | None
    :param session: Pooled session to send through; ``None`` sends each call
        on its own connection.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send ``method url`` once.

        A ``timeout`` passed by the caller is kept as given.

        :param method: HTTP verb, any case.
        :type method: :class:`str`
        :param url: Absolute URL.
        :type url: :class:`str`
        :param kwargs: Forwarded to ``request()``: ``headers``, ``params``,
            ``json``, ``data``, ``files``.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: When no response is received.
        """
        options: Dict[str, Any] = dict(kwargs)
        if "timeout" not in options:
            options["timeout"] = (
                self.default_timeout if self.default_timeout is not None else _method_timeout(method)
            )
        send = self._session.request if self._session is not None else requests.request
        return send(method, url, **options)

    def close(self) -> None:
        """Release the pooled session, if any. Repeated calls do nothing."""
        session, self._session = self._session, None
        if session is not None:
            session.close()
