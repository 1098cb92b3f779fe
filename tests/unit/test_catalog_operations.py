# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""Unit tests for the templates, assets, products, jobs and directory namespaces."""

import datetime as _dt
import json
import unittest
from unittest.mock import MagicMock

from FieldOps.Crm.client import CrmClient
from FieldOps.Crm.core.config import CrmConfig
from FieldOps.Crm.core.results import PaginatedResponse, TemplateResponse
from FieldOps.Crm.models.activity import CheckInOut
from FieldOps.Crm.models.catalog import Asset, AttachedProduct, AttachProduct, CatalogProduct
from FieldOps.Crm.models.field import Field
from FieldOps.Crm.models.filters import Filter
from FieldOps.Crm.models.record import DataTemplate
from FieldOps.Crm.models.template_type import TemplateType


class _OperationsTestCase(unittest.TestCase):
    def setUp(self):
        self.client = CrmClient("https://api.example.com", "k", "s", CrmConfig())
        self.client._api = MagicMock()
        self.client._api.config = CrmConfig()
        self.api = self.client._api


class TestTemplateOperations(_OperationsTestCase):
    """Unit tests for client.templates."""

    def test_get_categories(self):
        self.api._call.return_value = {"data": ["Installation", "Repair"]}
        result = self.client.templates.get_categories(TemplateType.Job)
        self.api._call.assert_called_once_with("get", "/category", params={"type": 3})
        self.assertEqual(result.data, ["Installation", "Repair"])

    def test_get_statuses(self):
        self.api._call.return_value = {"data": ["Open", "Closed"]}
        result = self.client.templates.get_statuses(TemplateType.Job, "Repair")
        self.api._call.assert_called_once_with("get", "/status", params={"type": 3, "category": "Repair"})
        self.assertEqual(result.data, ["Open", "Closed"])

    def test_get_template(self):
        self.api._call.return_value = {
            "data": {
                "type": 3,
                "category": "Repair",
                "default_fields": [{"lbl_id": "f1", "label": "Name", "type": "text", "value": None}],
                "dynamic_fields": [{"lbl_id": "d1", "label": "Region", "type": "select", "value": None}],
            }
        }
        result = self.client.templates.get(TemplateType.Job, "Repair")
        self.api._call.assert_called_once_with("get", "/template", params={"type": 3, "category": "Repair"})
        self.assertIsInstance(result.data, DataTemplate)
        self.assertEqual(result.data.dynamic_fields[0], Field("d1", "Region", "select"))


class TestAssetOperations(_OperationsTestCase):
    """Unit tests for client.assets."""

    def test_list_unscoped(self):
        self.api._call.return_value = {"data": [{"id": 1, "name": "Pump"}], "current_page": 1, "last_page": 2}
        page = self.client.assets.list()
        self.api._call.assert_called_once_with(
            "get", "/asset", params={"type": None, "ref_id": None, "filter": None, "page": None}
        )
        self.assertIsInstance(page, PaginatedResponse)
        self.assertEqual(page.data, [Asset(id="1", name="Pump")])
        self.assertTrue(page.has_more)

    def test_list_scoped_with_filter(self):
        self.api._call.return_value = {"data": []}
        self.client.assets.list(TemplateType.Job, "ref-001", Filter(name="Pump"), page=2)
        params = self.api._call.call_args.kwargs["params"]
        self.assertEqual(params["type"], 3)
        self.assertEqual(params["ref_id"], "ref-001")
        self.assertEqual(json.loads(params["filter"]), {"name": "Pump"})
        self.assertEqual(params["page"], 2)

    def test_get_mapping(self):
        self.api._call.return_value = {"data": ["ref-001"]}
        result = self.client.assets.get_mapping(TemplateType.Job, "a-1")
        self.api._call.assert_called_once_with("get", "/asset-mapping", params={"type": 3, "asset_id": "a-1"})
        self.assertEqual(result.data, ["ref-001"])

    def test_sync_attached(self):
        self.api._call.return_value = {"data": True}
        self.client.assets.sync_attached(TemplateType.Job, "ref-001", ("a-1", "a-2"))
        kwargs = self.api._call.call_args.kwargs
        self.assertEqual(self.api._call.call_args.args, ("patch", "/asset-attach-list"))
        self.assertEqual(kwargs["json"], {"type": 3, "ref_id": "ref-001", "assets": ["a-1", "a-2"]})


class TestProductOperations(_OperationsTestCase):
    """Unit tests for client.products."""

    def test_list_by_name(self):
        self.api._call.return_value = {"data": [{"id": 4, "name": "Cable", "uom_list": ["m"]}]}
        page = self.client.products.list(name="Cable")
        params = self.api._call.call_args.kwargs["params"]
        self.assertEqual(params["filter"], '{"name":"Cable"}')
        self.assertIsNone(params["page"])
        self.assertIsInstance(page.data[0], CatalogProduct)

    def test_list_without_name_omits_filter(self):
        self.api._call.return_value = {"data": []}
        self.client.products.list(page=3)
        self.api._call.assert_called_once_with("get", "/product", params={"page": 3, "filter": None})

    def test_get_attached(self):
        self.api._call.return_value = {
            "data": [{"id": "4", "name": "Cable", "total": 5.3, "dynamic_fields": []}],
            "dynamic_fields_templates": [{"lbl_id": "p1", "label": "Colour", "type": "text"}],
        }
        result = self.client.products.get_attached(TemplateType.Job, "ref-001")
        self.api._call.assert_called_once_with("get", "/product-attached", params={"type": 3, "ref_id": "ref-001"})
        self.assertIsInstance(result, TemplateResponse)
        self.assertIsInstance(result.data[0], AttachedProduct)
        self.assertEqual(result.dynamic_fields_templates[0].lbl_id, "p1")

    def test_attach(self):
        self.api._call.return_value = {"data": None}
        line = AttachProduct(id="4", name="Cable", quantity=2, uom_name="m")
        self.assertIs(self.client.products.attach(TemplateType.Job, "ref-001", [line]), True)
        self.api._call.assert_called_once_with(
            "post", "/add-product", json={"type": 3, "ref_id": "ref-001", "data": [line.to_dict()]}
        )


class TestJobOperations(_OperationsTestCase):
    """Unit tests for client.jobs."""

    def test_get_travel_list(self):
        self.api._call.return_value = {
            "data": [
                {"type": "Check-In", "datetime": "2024-03-01 08:00:00", "gps": [3.1, 101.6]},
                {"type": "Travelling", "travel_distance": 4.2},
            ]
        }
        result = self.client.jobs.get_travel_list(
            "ref-001", start=_dt.datetime(2024, 3, 1), end=_dt.datetime(2024, 3, 1, 23, 59, 59)
        )
        self.api._call.assert_called_once_with(
            "get",
            "/data/checkin",
            params={"type": 3, "ref_id": "ref-001", "start": "2024-03-01 00:00:00", "end": "2024-03-01 23:59:59"},
        )
        self.assertTrue(all(isinstance(e, CheckInOut) for e in result.data))
        self.assertEqual(result.data[1].travel_distance, 4.2)

    def test_get_travel_list_without_bounds(self):
        self.api._call.return_value = {"data": []}
        self.client.jobs.get_travel_list("ref-001")
        self.assertEqual(self.api._call.call_args.kwargs["params"], {"type": 3, "ref_id": "ref-001"})

    def test_get_mileage(self):
        self.api._call.return_value = {"data": {"distance": 12.5}}
        result = self.client.jobs.get_mileage("ref-001")
        self.api._call.assert_called_once_with("get", "/data/travel", params={"type": 3, "ref_id": "ref-001"})
        self.assertEqual(result.data, {"distance": 12.5})


class TestDirectoryOperations(_OperationsTestCase):
    """Unit tests for client.directory."""

    def test_get_users(self):
        self.api._call.return_value = {"data": ["alice", "bob"]}
        self.assertEqual(self.client.directory.get_users().data, ["alice", "bob"])
        self.api._call.assert_called_once_with("get", "/users")

    def test_get_departments(self):
        self.api._call.return_value = {"data": ["ops"]}
        self.assertEqual(self.client.directory.get_departments().data, ["ops"])
        self.api._call.assert_called_once_with("get", "/departments")


if __name__ == "__main__":
    unittest.main()
