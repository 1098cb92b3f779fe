# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Internal helpers for the FieldOps CRM SDK."""

__all__ = []
