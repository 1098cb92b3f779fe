# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Operation namespace classes for the FieldOps CRM SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- TemplateOperations: categories, statuses and record templates
- RecordOperations: record search, CRUD, status, attachments and permissions
- AssetOperations: assets and their attachment to records
- ProductOperations: product catalog and attached product lines
- JobOperations: job check-in/out and travel data
- DirectoryOperations: tenant users and departments
"""

__all__ = []
