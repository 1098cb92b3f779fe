# Copyright (c) FieldOps.
# Licensed under the MIT license.

import pytest

from FieldOps.Crm.data._router import _RequestRouter


@pytest.mark.parametrize(
    "base,path",
    [
        ("https://api.example.com", "/data"),
        ("https://api.example.com/", "data"),
        ("https://api.example.com/", "/data"),
        ("https://api.example.com", "data"),
    ],
)
def test_slashes_are_normalized(base, path):
    assert _RequestRouter(base, "k", "s").url(path) == "https://api.example.com/v1/data"


def test_version_segment():
    router = _RequestRouter("https://api.example.com", "k", "s")
    assert router.url("/data/attachment", "v2") == "https://api.example.com/v2/data/attachment"
    assert router.url("/data/status/all-logs") == "https://api.example.com/v1/data/status/all-logs"


def test_base_with_path_prefix():
    router = _RequestRouter("https://gw.example.com/crm/", "k", "s")
    assert router.url("/search") == "https://gw.example.com/crm/v1/search"


def test_auth_headers():
    assert _RequestRouter("https://x", "the-key", "the-secret").headers() == {
        "key": "the-key",
        "secret": "the-secret",
    }


def test_caller_headers_merge_and_win():
    headers = _RequestRouter("https://x", "k", "s").headers({"secret": "override", "Accept-Language": "ms"})
    assert headers == {"key": "k", "secret": "override", "Accept-Language": "ms"}
