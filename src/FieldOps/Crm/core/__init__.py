# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Core infrastructure components for the FieldOps CRM SDK.

This module contains the foundational components including configuration,
HTTP transport, response envelopes, and error handling.
"""

from .results import (
    Response,
    PaginatedResponse,
    TemplateResponse,
)

__all__ = [
    "Response",
    "PaginatedResponse",
    "TemplateResponse",
]
