# Copyright (c) FieldOps.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional

import requests

from .core.config import CrmConfig
from .data._api import _ApiClient
from .operations.assets import AssetOperations
from .operations.directory import DirectoryOperations
from .operations.jobs import JobOperations
from .operations.products import ProductOperations
from .operations.records import RecordOperations
from .operations.templates import TemplateOperations


class CrmClient:
    """
    High-level client for the FieldOps CRM Web API.

    Every request carries the ``key`` and ``secret`` headers built from the
    credentials given here. Calls are sent once; failures are raised as
    :class:`~FieldOps.Crm.core.errors.CrmError` subclasses without retry.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases the pooled session on exit::

            with CrmClient(base_url, api_key, api_secret) as client:
                page = client.records.search(TemplateType.Job)

    Operations are organized under namespaces:

    - ``client.templates``: categories, statuses and blank record templates
    - ``client.records``: search, create, update, status, attachments, permissions, comments
    - ``client.assets``: assets and asset attachment
    - ``client.products``: product catalog and attached product lines
    - ``client.jobs``: job check-in/out and travel data
    - ``client.directory``: tenant users and departments

    :param base_url: Service root, for example ``"https://api.example.com"``.
        The version segment is appended per call.
    :type base_url: :class:`str`
    :param api_key: API key.
    :type api_key: :class:`str`
    :param api_secret: API secret.
    :type api_secret: :class:`str`
    :param config: Optional configuration for timeouts, timestamp zone and API versions.
        If not provided, defaults are loaded from :meth:`~FieldOps.Crm.core.config.CrmConfig.from_env`.
    :type config: ~FieldOps.Crm.core.config.CrmConfig or None

    :raises ValueError: If ``base_url``, ``api_key`` or ``api_secret`` is empty.

    .. note::
        The client lazily initializes its internal API client on first use,
        allowing lightweight construction without immediate network calls.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        config: Optional[CrmConfig] = None,
    ) -> None:
        self._base_url = (base_url or "").strip()
        if not self._base_url:
            raise ValueError("base_url is required.")
        if not api_key or not api_secret:
            raise ValueError("api_key and api_secret are required.")
        self._api_key = api_key
        self._api_secret = api_secret
        self._config = config or CrmConfig.from_env()
        self._api: Optional[_ApiClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.templates = TemplateOperations(self)
        self.records = RecordOperations(self)
        self.assets = AssetOperations(self)
        self.products = ProductOperations(self)
        self.jobs = JobOperations(self)
        self.directory = DirectoryOperations(self)

    def __enter__(self) -> "CrmClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context reuse this session.

        :return: The client instance.
        :rtype: CrmClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild the API client so it picks up the session
            if self._api is not None:
                self._api.close()
                self._api = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager, closing the pooled session. Exceptions are not suppressed."""
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Safe to call multiple times.
        """
        if self._api is not None:
            self._api.close()
            self._api = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_api(self) -> _ApiClient:
        """
        Get or create the internal API client instance.

        :return: The lazily-initialized low-level client used to perform HTTP requests.
        :rtype: ~FieldOps.Crm.data._api._ApiClient
        """
        if self._api is None:
            self._api = _ApiClient(
                self._base_url,
                self._api_key,
                self._api_secret,
                self._config,
                session=self._session,
            )
        return self._api
