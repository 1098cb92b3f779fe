# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
FieldOps CRM SDK - Quickstart

Walks through the main record workflow against a live tenant:

1. Read the categories and the blank template of a job
2. Fill default and dynamic fields by label and create the job
3. Move the job to another status and read its status history
4. Attach a link to a dynamic field and read the attachments back
5. Search jobs with a filter

Prerequisites:
    pip install fieldops-crm
    export FIELDOPS_CRM_BASE_URL=https://api.example.com
    export FIELDOPS_CRM_API_KEY=...
    export FIELDOPS_CRM_API_SECRET=...
"""

import logging
import os
import sys

from FieldOps.Crm import CrmClient
from FieldOps.Crm.core.errors import CrmError, HttpError
from FieldOps.Crm.models.attachment import LinkAttachment
from FieldOps.Crm.models.filters import Filter
from FieldOps.Crm.models.record import RecordAccessor
from FieldOps.Crm.models.template_type import FieldGroup, TemplateType


def log_call(call: str) -> None:
    print({"call": call})


def main() -> None:
    base_url = os.getenv("FIELDOPS_CRM_BASE_URL", "").strip() or input(
        "Enter CRM base URL (e.g. https://api.example.com): "
    ).strip()
    api_key = os.getenv("FIELDOPS_CRM_API_KEY", "").strip()
    api_secret = os.getenv("FIELDOPS_CRM_API_SECRET", "").strip()
    if not base_url or not api_key or not api_secret:
        print("[ERR] Base URL, API key and API secret are required; exiting.")
        sys.exit(1)

    if os.getenv("FIELDOPS_CRM_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    with CrmClient(base_url, api_key, api_secret) as client:
        # ── Template ──────────────────────────────────────────────
        log_call("client.templates.get_categories(TemplateType.Job)")
        categories = client.templates.get_categories(TemplateType.Job).data or []
        if not categories:
            print("[ERR] Tenant has no job categories; exiting.")
            sys.exit(1)
        category = categories[0]
        print(f"[INFO] Using category: {category}")

        log_call(f"client.templates.get(TemplateType.Job, {category!r})")
        template = client.templates.get(TemplateType.Job, category).data
        for f in template.dynamic_fields:
            print(f"  dynamic field {f.lbl_id}: {f.label} ({f.type})")

        # ── Create ────────────────────────────────────────────────
        accessor = RecordAccessor(template)
        accessor.default_fields().set_value_by_label("Name", "Quickstart job")
        log_call("client.records.create(template)")
        ref = client.records.create(template).data
        print(f"[OK] Created job {ref.ref_id}")

        # ── Status ────────────────────────────────────────────────
        statuses = client.templates.get_statuses(TemplateType.Job, category).data or []
        if len(statuses) > 1:
            log_call(f"client.records.update_status(TemplateType.Job, {ref.ref_id!r}, {statuses[1]!r})")
            client.records.update_status(TemplateType.Job, ref.ref_id, statuses[1])
            for entry in client.records.list_status_logs(TemplateType.Job, ref.ref_id).data or []:
                print(f"  {entry.datetime}: {entry.name}")

        # ── Attachment ────────────────────────────────────────────
        target = next((f for f in template.dynamic_fields if f.type == "file"), None)
        if target is not None:
            link = LinkAttachment(field=target, group=FieldGroup.DYNAMIC, link="https://example.com/site.jpg")
            log_call(f"client.records.upload_attachment(TemplateType.Job, {ref.ref_id!r}, link)")
            try:
                url = client.records.upload_attachment(TemplateType.Job, ref.ref_id, link).data
                print(f"[OK] Attachment stored at {url}")
            except HttpError as exc:
                print(f"[WARN] Attachment rejected: {exc.message} {exc.details.get('errors')}")
            record = client.records.get_attachments(TemplateType.Job, ref.ref_id).data
            print(f"  {target.label}: {RecordAccessor(record).dynamic_fields().get_value(target.lbl_id)}")

        # ── Search ────────────────────────────────────────────────
        flt = Filter(ref_id=ref.ref_id)
        log_call("client.records.search(TemplateType.Job, filter=flt)")
        page = client.records.search(TemplateType.Job, category=category, filter=flt)
        for row in page.data or []:
            print(f"  {row.seq_no} [{row.status}]")
        print(f"[INFO] page {page.current_page}/{page.last_page}, total {page.total}")


if __name__ == "__main__":
    try:
        main()
    except CrmError as exc:
        print({"error": exc.to_dict()})
        sys.exit(1)
