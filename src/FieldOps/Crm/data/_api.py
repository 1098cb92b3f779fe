# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Low-level FieldOps CRM Web API client: routing, sending, and envelope unwrapping."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ..core._error_codes import (
    BACKEND_ERROR_ENVELOPE,
    BACKEND_NON_JSON_BODY,
    TRANSIENT_STATUS_CODES,
    TRANSPORT_CONNECTION,
    TRANSPORT_TIMEOUT,
    http_subcode,
)
from ..core._http import _HttpClient
from ..core.config import CrmConfig
from ..core.errors import HttpError, TransportError
from ._router import _RequestRouter

_LOGGER = logging.getLogger(__name__)

_BODY_EXCERPT_LIMIT = 200


def _error_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, list) and value:
                return "; ".join(str(v) for v in value)
    return None


def _raise_for_status(response: requests.Response, method: str, url: str) -> None:
    """Raise :class:`HttpError` for a non-2xx response; return silently otherwise."""
    status = response.status_code
    if 200 <= status < 300:
        return
    retry_after: Optional[int] = None
    raw_retry = (response.headers or {}).get("Retry-After")
    if raw_retry is not None:
        try:
            retry_after = int(raw_retry)
        except (TypeError, ValueError):
            retry_after = None
    text = response.text or ""
    message = _error_message(response) or f"HTTP {status} from {method.upper()} {url}"
    raise HttpError(
        message,
        status_code=status,
        is_transient=status in TRANSIENT_STATUS_CODES,
        subcode=http_subcode(status),
        url=url,
        method=method.upper(),
        body_excerpt=text[:_BODY_EXCERPT_LIMIT] if text else None,
        retry_after=retry_after,
    )


class _ApiClient:
    """
    FieldOps CRM Web API client.

    Resolves each logical call to a versioned URL, attaches the ``key`` and
    ``secret`` headers, sends it once, and unwraps the JSON envelope. Failures
    are raised to the caller:

    - network failures as :class:`~FieldOps.Crm.core.errors.TransportError`;
    - non-2xx responses, and 2xx envelopes carrying a non-empty ``error``
      array, as :class:`~FieldOps.Crm.core.errors.HttpError`.

    :param base_url: Service root URL.
    :param api_key: API key sent in the ``key`` header.
    :param api_secret: API secret sent in the ``secret`` header.
    :param config: Optional configuration; defaults come from
        :meth:`~FieldOps.Crm.core.config.CrmConfig.from_env`.
    :param session: Optional pooled session.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        config: Optional[CrmConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or CrmConfig.from_env()
        self._router = _RequestRouter(base_url, api_key, api_secret)
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)

    def _url(self, path: str, version: Optional[str] = None) -> str:
        return self._router.url(path, version or self.config.api_version)

    def _request(
        self,
        method: str,
        path: str,
        *,
        version: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        url = self._url(path, version)
        if params is not None:
            params = {k: v for k, v in params.items() if v is not None}
        _LOGGER.debug("%s %s params=%s", method.upper(), url, params)
        try:
            response = self._http._request(
                method,
                url,
                headers=self._router.headers(headers),
                params=params,
                **kwargs,
            )
        except requests.exceptions.Timeout as exc:
            _LOGGER.warning("%s %s timed out: %s", method.upper(), url, exc)
            raise TransportError(
                f"Request timed out: {method.upper()} {url}",
                subcode=TRANSPORT_TIMEOUT,
                details={"url": url, "method": method.upper()},
            ) from exc
        except requests.exceptions.RequestException as exc:
            _LOGGER.warning("%s %s failed: %s", method.upper(), url, exc)
            raise TransportError(
                f"Request failed: {method.upper()} {url}: {exc}",
                subcode=TRANSPORT_CONNECTION,
                details={"url": url, "method": method.upper()},
            ) from exc
        try:
            _raise_for_status(response, method, url)
        except HttpError as exc:
            _LOGGER.warning("%s %s returned HTTP %s", method.upper(), url, exc.status_code)
            raise
        return response

    def _call(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Send a request and return its decoded JSON envelope.

        :raises ~FieldOps.Crm.core.errors.HttpError: If the status is not 2xx, the body
            is not JSON, or the envelope's ``error`` array is non-empty.
        """
        response = self._request(method, path, **kwargs)
        url = self._url(path, kwargs.get("version"))
        try:
            body = response.json()
        except ValueError:
            text = response.text or ""
            raise HttpError(
                f"Response from {method.upper()} {url} is not JSON",
                status_code=response.status_code,
                subcode=BACKEND_NON_JSON_BODY,
                url=url,
                method=method.upper(),
                body_excerpt=text[:_BODY_EXCERPT_LIMIT] if text else None,
            ) from None
        payload = body if isinstance(body, dict) else {"data": body}
        errors = payload.get("error")
        if errors:
            errors = errors if isinstance(errors, list) else [errors]
            _LOGGER.warning("%s %s reported errors: %s", method.upper(), url, errors)
            raise HttpError(
                "; ".join(str(e) for e in errors),
                status_code=response.status_code,
                subcode=BACKEND_ERROR_ENVELOPE,
                url=url,
                method=method.upper(),
                errors=errors,
            )
        return payload

    def close(self) -> None:
        self._http.close()
