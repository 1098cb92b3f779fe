# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for FieldOps CRM SDK tests.

This module provides common test fixtures, fake HTTP transports, and sample
payloads that can be used across all test modules.
"""

import json

import pytest

from FieldOps.Crm.core.config import CrmConfig


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code=200, body=None, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self._body = body
        if isinstance(body, (dict, list)):
            self.text = json.dumps(body)
        else:
            self.text = body or ""

    def json(self):
        if isinstance(self._body, (dict, list)):
            return self._body
        raise ValueError("non-json")


class RecordingHTTP:
    """Fake transport that records each call and replays queued responses."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        pass

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def fake_response():
    """Factory for fake ``requests.Response`` objects: ``fake_response(status, body, headers)``."""
    return FakeResponse


@pytest.fixture
def recording_http():
    """Factory for a recording fake transport: ``recording_http([responses...])``."""
    return RecordingHTTP


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return CrmConfig(http_timeout=5)


@pytest.fixture
def sample_base_url():
    """Standard test base URL."""
    return "https://api.example.com"


@pytest.fixture
def sample_record_payload():
    """A persisted Job record as the backend returns it."""
    return {
        "type": 3,
        "category": "Installation",
        "ref_id": "ref-001",
        "seq_no": "J-0001",
        "status": "Open",
        "default_fields": [
            {"lbl_id": "f1", "label": "Name", "type": "text", "value": "A"},
            {"lbl_id": "f2", "label": "Phone", "type": "text", "value": "555-0100"},
        ],
        "dynamic_fields": [
            {"lbl_id": "d1", "label": "Region", "type": "select", "value": "North"},
            {"lbl_id": "d2", "label": "Photos", "type": "file", "value": [{"url": "https://cdn.example.com/a.jpg"}]},
        ],
    }
