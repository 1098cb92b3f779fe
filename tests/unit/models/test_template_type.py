# Copyright (c) FieldOps.
# Licensed under the MIT license.

import pytest

from FieldOps.Crm.models.template_type import FieldGroup, TemplateType, to_template_type


def test_wire_values():
    assert int(TemplateType.Customer) == 1
    assert int(TemplateType.Job) == 3
    assert int(TemplateType.DF01) == 6
    assert int(TemplateType.PF) == 13
    assert FieldGroup.DYNAMIC.value == "dynamic"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("customer", TemplateType.Customer),
        ("deal", TemplateType.Deal),
        ("activity", TemplateType.Asset),
        ("product", TemplateType.Product),
        ("DR01", TemplateType.DF01),
        ("DR07", TemplateType.DF07),
        ("public_form", TemplateType.PF),
    ],
)
def test_webhook_names(name, expected):
    assert to_template_type(name) is expected


def test_unknown_webhook_name():
    assert to_template_type("dr01") is None
    assert to_template_type("") is None
