# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import pandas as pd

from ..models.field import Field
from ..models.record import DataLevel
from ..models.template_type import FieldGroup


def _column_name(row: Dict[str, Any], group: FieldGroup, field: Field, by_label: bool) -> str:
    """Return the first free column name for ``field`` in ``row``.

    Tries the label (or ``lbl_id``), then ``<group>.<label>``, then
    ``<group>.<lbl_id>``, then ``<group>.<lbl_id>.<n>``.
    """
    base = field.label if by_label and field.label else field.lbl_id
    for name in (base, f"{group.value}.{base}", f"{group.value}.{field.lbl_id}"):
        if name not in row:
            return name
    n = 2
    while f"{group.value}.{field.lbl_id}.{n}" in row:
        n += 1
    return f"{group.value}.{field.lbl_id}.{n}"


def records_to_dataframe(records: Iterable[DataLevel], by_label: bool = True) -> pd.DataFrame:
    """Flatten search rows into a DataFrame, one column per field.

    Record attributes come first (``id``, ``seq_no``, ``category``, ``status``),
    then default fields, then dynamic fields. Labels are not unique, so a field
    whose name is already taken is qualified with its group (``default.`` or
    ``dynamic.``) and, if still taken, with its ``lbl_id``. No value is dropped.

    :param records: Search rows.
    :param by_label: When True (default) columns are named by field label,
        otherwise by ``lbl_id``.
    """
    rows: List[Dict[str, Any]] = []
    for rec in records:
        row: Dict[str, Any] = {
            "id": rec.id,
            "seq_no": rec.seq_no,
            "category": rec.category,
            "status": rec.status,
        }
        for group, fields in ((FieldGroup.DEFAULT, rec.default_fields), (FieldGroup.DYNAMIC, rec.dynamic_fields)):
            for f in fields:
                row[_column_name(row, group, f, by_label)] = f.value
        rows.append(row)
    return pd.DataFrame(rows)
