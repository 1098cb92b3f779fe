# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Unit tests for record models and RecordAccessor."""

import unittest

from FieldOps.Crm.models.field import Field
from FieldOps.Crm.models.record import (
    DataLevel,
    DataRef,
    DataRefLevel,
    DataTemplate,
    ProductRef,
    RecordAccessor,
    SourceRef,
)
from FieldOps.Crm.models.template_type import TemplateType


class TestRecordAccessor(unittest.TestCase):
    """Test cases for RecordAccessor over both field groups."""

    def setUp(self):
        self.record = DataTemplate(
            type=TemplateType.Job,
            default_fields=[Field(lbl_id="f1", label="Name", type="text", value="A")],
            dynamic_fields=[],
        )
        self.accessor = RecordAccessor(self.record)

    def test_job_scenario(self):
        """Setting a default field through the accessor is read back; the dynamic group is separate."""
        self.assertEqual(self.accessor.default_fields().set_value("f1", "B").get_value("f1"), "B")
        self.assertIsNone(self.accessor.dynamic_fields().get_value("f1"))

    def test_mutation_visible_through_record(self):
        self.accessor.default_fields().set_value("f1", "B")
        self.assertEqual(self.record.default_fields[0].value, "B")

    def test_helpers_are_stable(self):
        self.assertIs(self.accessor.default_fields(), self.accessor.default_fields())
        self.assertIs(self.accessor.dynamic_fields(), self.accessor.dynamic_fields())
        self.assertIs(self.accessor.ref, self.record)

    def test_replaced_list_requires_resync(self):
        self.record.dynamic_fields = [Field("d1", "Region", value="North")]
        self.assertTrue(self.accessor.is_stale)
        self.assertIsNone(self.accessor.dynamic_fields().get_value("d1"))

        self.accessor.resync()

        self.assertFalse(self.accessor.is_stale)
        self.assertEqual(self.accessor.dynamic_fields().get_value("d1"), "North")

    def test_groups_are_not_merged(self):
        record = DataTemplate(
            type=TemplateType.Deal,
            default_fields=[Field("x", "Same", value="default")],
            dynamic_fields=[Field("x", "Same", value="dynamic")],
        )
        accessor = RecordAccessor(record)
        accessor.dynamic_fields().set_value("x", "changed")
        self.assertEqual(accessor.default_fields().get_value("x"), "default")
        self.assertEqual(accessor.dynamic_fields().get_value("x"), "changed")


class TestRecordModels(unittest.TestCase):
    """Test cases for record parsing and payloads."""

    def test_ref_level_from_dict(self):
        rec = DataRefLevel.from_dict(
            {
                "type": 3,
                "category": "Installation",
                "ref_id": "ref-001",
                "seq_no": 17,
                "status": "Open",
                "default_fields": [{"lbl_id": "f1", "label": "Name", "type": "text", "value": "A"}],
                "dynamic_fields": [],
                "source": {"ref_id": "deal-9", "type": 2},
                "product": {"subtotal": 10.0, "tax": 0.6, "amount": 10.6, "currency": "MYR"},
                "pdf_url": None,
            }
        )
        self.assertIs(rec.type, TemplateType.Job)
        self.assertEqual(rec.ref_id, "ref-001")
        self.assertEqual(rec.seq_no, "17")
        self.assertEqual(rec.source, SourceRef(ref_id="deal-9", type=TemplateType.Deal))
        self.assertEqual(rec.product, ProductRef(subtotal=10.0, tax=0.6, amount=10.6, currency="MYR"))
        self.assertIsNone(rec.pdf_url)
        self.assertIsInstance(rec.default_fields[0], Field)

    def test_template_payload_omits_unset_keys(self):
        template = DataTemplate(type=TemplateType.Customer, default_fields=[Field("f1", "Name", "text", "A")])
        payload = template.to_payload()
        self.assertEqual(payload["type"], 1)
        self.assertEqual(payload["default_fields"], [{"lbl_id": "f1", "label": "Name", "type": "text", "value": "A"}])
        self.assertEqual(payload["dynamic_fields"], [])
        for key in ("category", "customer_id", "deal_id", "activity_id", "source"):
            self.assertNotIn(key, payload)

    def test_template_payload_includes_links(self):
        template = DataTemplate(
            type=TemplateType.Job,
            category="Installation",
            customer_id=12,
            source=SourceRef(ref_id="deal-9", type=TemplateType.Deal),
        )
        payload = template.to_payload()
        self.assertEqual(payload["category"], "Installation")
        self.assertEqual(payload["customer_id"], 12)
        self.assertEqual(payload["source"], {"ref_id": "deal-9", "type": 2})

    def test_ref_level_payload_carries_ref_id(self):
        rec = DataRefLevel(type=TemplateType.Job, ref_id="ref-001", status="Open")
        payload = rec.to_payload()
        self.assertEqual(payload["ref_id"], "ref-001")
        self.assertEqual(payload["status"], "Open")
        for key in ("seq_no", "pdf_url", "public_pdf_url"):
            self.assertNotIn(key, payload)

    def test_ref_level_payload_sends_whole_record(self):
        rec = DataRefLevel(
            type=TemplateType.Job,
            ref_id="ref-001",
            seq_no="J-17",
            status="Open",
            pdf_url="https://cdn.example.com/j17.pdf",
            public_pdf_url="https://share.example.com/j17",
        )
        payload = rec.to_payload()
        self.assertEqual(payload["seq_no"], "J-17")
        self.assertEqual(payload["pdf_url"], "https://cdn.example.com/j17.pdf")
        self.assertEqual(payload["public_pdf_url"], "https://share.example.com/j17")

    def test_unknown_type_is_kept(self):
        rec = DataTemplate.from_dict({"type": "custom", "default_fields": [], "dynamic_fields": []})
        self.assertEqual(rec.type, "custom")

    def test_data_level_and_ref(self):
        row = DataLevel.from_dict({"type": 3, "id": 5, "seq_no": "J-1", "status": "Done", "category": "A"})
        self.assertEqual(row.id, "5")
        self.assertEqual(row.status, "Done")
        ref = DataRef.from_dict({"ref_id": "r", "type": "3"})
        self.assertIs(ref.type, TemplateType.Job)


def test_accessor_over_fetched_record(sample_record_payload):
    record = DataRefLevel.from_dict(sample_record_payload)
    accessor = RecordAccessor(record)

    assert accessor.default_fields().get_value_by_label("Phone") == "555-0100"
    assert accessor.dynamic_fields().get_value("d2") == [{"url": "https://cdn.example.com/a.jpg"}]

    accessor.dynamic_fields().set_value_by_label("Region", "South")
    payload = record.to_payload()
    assert payload["ref_id"] == "ref-001"
    assert payload["dynamic_fields"][0]["value"] == "South"
    assert payload["default_fields"][0]["value"] == "A"


if __name__ == "__main__":
    unittest.main()
