# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Webhook callback reporting."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .common.constants import CALLBACK_STATUS_FAILED, CALLBACK_STATUS_SUCCESS
from .core._error_codes import TRANSPORT_CONNECTION
from .core._http import _HttpClient
from .core.errors import TransportError
from .data._api import _raise_for_status

_LOGGER = logging.getLogger(__name__)


class CallbackHelper:
    """
    Reports the outcome of a webhook-triggered job to the callback URL the backend supplied.

    The callback URL is absolute and already authorized, so no ``key``/``secret``
    headers are attached.

    :param url: Callback URL from the webhook payload.
    :type url: str
    :param timeout: Optional request timeout in seconds.
    :type timeout: float | None

    Example::

        callback = CallbackHelper(payload["callback_url"])
        try:
            process(payload)
        except Exception:
            callback.fail("E_PROCESS")
            raise
        callback.success()
    """

    def __init__(self, url: str, timeout: Optional[float] = None) -> None:
        if not url:
            raise ValueError("url is required.")
        self.url = url
        self._http = _HttpClient(timeout=timeout)

    def success(self) -> requests.Response:
        """Report success (``{"status": 2}``)."""
        return self._post({"status": CALLBACK_STATUS_SUCCESS})

    def fail(self, error_code: str = "") -> requests.Response:
        """Report failure (``{"status": -1, "error_code": ...}``)."""
        return self._post({"status": CALLBACK_STATUS_FAILED, "error_code": error_code})

    def _post(self, body: Dict[str, Any]) -> requests.Response:
        _LOGGER.debug("POST %s %s", self.url, body)
        try:
            response = self._http._request("post", self.url, json=body)
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"Callback failed: POST {self.url}: {exc}",
                subcode=TRANSPORT_CONNECTION,
                details={"url": self.url, "method": "POST"},
            ) from exc
        _raise_for_status(response, "post", self.url)
        return response
