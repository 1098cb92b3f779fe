# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Python client for the FieldOps CRM Web API.

Example::

    from FieldOps.Crm import CrmClient
    from FieldOps.Crm.models.record import RecordAccessor
    from FieldOps.Crm.models.template_type import TemplateType

    with CrmClient("https://api.example.com", "my-key", "my-secret") as client:
        record = client.records.get(TemplateType.Job, ref_id).data
        RecordAccessor(record).dynamic_fields().set_value_by_label("Region", "North")
        client.records.update(TemplateType.Job, record)
"""

import logging

from .client import CrmClient
from .callback import CallbackHelper

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["CrmClient", "CallbackHelper", "__version__"]
