# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""FastAPI webhook receiver that processes CRM record events and reports back."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import BackgroundTasks, FastAPI, HTTPException
from pydantic import BaseModel

from FieldOps.Crm import CallbackHelper, CrmClient
from FieldOps.Crm.core.errors import CrmError
from FieldOps.Crm.models.template_type import to_template_type

_LOGGER = logging.getLogger(__name__)

_REQUIRED_ENV_VARS = (
    "FIELDOPS_CRM_BASE_URL",
    "FIELDOPS_CRM_API_KEY",
    "FIELDOPS_CRM_API_SECRET",
)


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Environment variable '{name}' is required.")
    return value


@lru_cache(maxsize=1)
def _crm_client() -> CrmClient:
    base_url, api_key, api_secret = (_require_env(name) for name in _REQUIRED_ENV_VARS)
    return CrmClient(base_url, api_key, api_secret)


class WebhookEvent(BaseModel):
    type: str
    ref_id: str
    callback_url: str
    data: Optional[Dict[str, Any]] = None


app = FastAPI(title="FieldOps CRM webhook receiver")


def _process(event: WebhookEvent) -> None:
    callback = CallbackHelper(event.callback_url)
    kind = to_template_type(event.type)
    try:
        record = _crm_client().records.get(kind, event.ref_id).data
        _LOGGER.info("Processed %s %s (seq %s)", kind.name, record.ref_id, record.seq_no)
    except CrmError as exc:
        _LOGGER.warning("Processing %s failed: %s", event.ref_id, exc)
        callback.fail(exc.subcode or exc.code)
        return
    callback.success()


@app.post("/webhook", status_code=202)
def receive(event: WebhookEvent, background: BackgroundTasks) -> Dict[str, str]:
    if to_template_type(event.type) is None:
        raise HTTPException(status_code=400, detail=f"Unknown record type '{event.type}'")
    background.add_task(_process, event)
    return {"status": "accepted"}
