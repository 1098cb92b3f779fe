# Copyright (c) FieldOps.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

TRANSIENT_STATUS_CODES = {429, 502, 503, 504}

# Backend-reported errors inside a 2xx envelope
BACKEND_ERROR_ENVELOPE = "backend_error_envelope"
BACKEND_NON_JSON_BODY = "backend_non_json_body"

# Validation subcodes
VALIDATION_UNKNOWN_OPERATOR = "validation_unknown_operator"
VALIDATION_MALFORMED_PREDICATE = "validation_malformed_predicate"
VALIDATION_FILTER_NOT_SERIALIZABLE = "validation_filter_not_serializable"
VALIDATION_UNKNOWN_FIELD_GROUP = "validation_unknown_field_group"
VALIDATION_ATTACHMENT_PAYLOAD_MISSING = "validation_attachment_payload_missing"

# Transport subcodes
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_TIMEOUT = "transport_timeout"


def http_subcode(status_code: int) -> str:
    """Return the ``http_<status>`` subcode for a status code."""
    return f"http_{status_code}"
