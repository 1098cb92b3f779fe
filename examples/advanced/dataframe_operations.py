# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
FieldOps CRM SDK - DataFrame Walkthrough

Loads one page of search results per template type into pandas DataFrames
and prints a short summary of each.

Prerequisites:
    pip install fieldops-crm
"""

import sys

import pandas as pd

from FieldOps.Crm import CrmClient
from FieldOps.Crm.models.filters import Filter
from FieldOps.Crm.models.template_type import TemplateType


def main():
    # ── Setup ─────────────────────────────────────────────────────
    base_url = input("Enter CRM base URL (e.g. https://api.example.com): ").strip()
    api_key = input("API key: ").strip()
    api_secret = input("API secret: ").strip()
    if not base_url or not api_key or not api_secret:
        print("[ERR] Base URL, API key and API secret are required; exiting.")
        sys.exit(1)

    with CrmClient(base_url, api_key, api_secret) as client:
        # ── One frame per record kind ─────────────────────────────
        frames = {}
        for kind in (TemplateType.Customer, TemplateType.Deal, TemplateType.Job):
            df = client.records.search_dataframe(kind)
            frames[kind.name] = df
            print(f"\n[INFO] {kind.name}: {len(df)} rows, columns={list(df.columns)}")
            if not df.empty:
                print(df.head().to_string(index=False))

        # ── Status breakdown of jobs ──────────────────────────────
        jobs = frames["Job"]
        if not jobs.empty:
            print("\n[INFO] Jobs by status:")
            print(jobs.groupby("status").size().rename("count").to_string())

        # ── Filtered search, columns by field id ──────────────────
        flt = Filter(source_type=TemplateType.Deal)
        linked = client.records.search_dataframe(TemplateType.Job, filter=flt, by_label=False)
        print(f"\n[INFO] Jobs created from deals: {len(linked)}")

        combined = pd.concat(frames.values(), keys=frames.keys(), names=["kind"], sort=False)
        print(f"\n[INFO] Combined frame shape: {combined.shape}")


if __name__ == "__main__":
    main()
