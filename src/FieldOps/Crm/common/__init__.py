# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Common utilities and constants for the FieldOps CRM SDK.

This module contains shared constants and utilities used across the SDK.
"""

__all__ = []
