# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Data access layer for the FieldOps CRM SDK.

This module contains request routing and the low-level API client that sends
requests and unwraps response envelopes.
"""

__all__ = []
