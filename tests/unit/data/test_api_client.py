# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Unit tests for the low-level _ApiClient request path."""

import logging

import pytest

from FieldOps.Crm.core.config import CrmConfig
from FieldOps.Crm.core.errors import HttpError
from FieldOps.Crm.data._api import _ApiClient


@pytest.fixture
def api(recording_http, fake_response, sample_base_url, test_config):
    client = _ApiClient(sample_base_url + "/", "k", "s", test_config)
    client._http = recording_http([fake_response(200, {"data": "ok"})])
    return client


def test_request_carries_auth_headers(api):
    api._call("get", "/users")
    method, url, kwargs = api._http.last_call
    assert method == "get"
    assert url == "https://api.example.com/v1/users"
    assert kwargs["headers"] == {"key": "k", "secret": "s"}


def test_none_params_are_dropped(api):
    api._call("get", "/search", params={"type": 3, "filter": None, "category": None})
    assert api._http.last_call[2]["params"] == {"type": 3}


def test_version_override(api):
    api._call("get", "/data/attachment", version="v2", params={"type": 3, "ref_id": "r"})
    assert api._http.last_call[1] == "https://api.example.com/v2/data/attachment"


def test_extra_headers(api):
    api._call("get", "/users", headers={"X-Trace": "t1"})
    assert api._http.last_call[2]["headers"] == {"key": "k", "secret": "s", "X-Trace": "t1"}


def test_body_kwargs_pass_through(api):
    api._call("post", "/data", json={"type": 3})
    assert api._http.last_call[2]["json"] == {"type": 3}


def test_config_defaults_from_env(monkeypatch):
    monkeypatch.delenv("FIELDOPS_CRM_HTTP_TIMEOUT", raising=False)
    monkeypatch.setenv("FIELDOPS_CRM_TIMEZONE", "UTC")
    client = _ApiClient("https://x", "k", "s")
    assert client.config.timezone == "UTC"
    assert client._http.default_timeout is None


def test_failures_are_logged(recording_http, fake_response, caplog):
    client = _ApiClient("https://api.example.com", "k", "s", CrmConfig())
    client._http = recording_http([fake_response(404, {"message": "nope"})])
    with caplog.at_level(logging.WARNING, logger="FieldOps.Crm.data._api"):
        with pytest.raises(HttpError):
            client._call("get", "/data")
    assert any("404" in r.getMessage() for r in caplog.records)
