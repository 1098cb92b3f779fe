# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Data models and type definitions for the FieldOps CRM SDK.

This module provides strongly-typed dataclasses for CRM records and requests:

- :class:`~FieldOps.Crm.models.field.Field` and :class:`~FieldOps.Crm.models.field.FieldHelper`: field slots and lookup.
- :class:`~FieldOps.Crm.models.record.DataTemplate` and :class:`~FieldOps.Crm.models.record.RecordAccessor`: records.
- :class:`~FieldOps.Crm.models.filters.Filter` and :class:`~FieldOps.Crm.models.filters.FilterBuilder`: search filters.
- :class:`~FieldOps.Crm.models.attachment.FileAttachment` and
  :class:`~FieldOps.Crm.models.attachment.LinkAttachment`: attachment uploads.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
