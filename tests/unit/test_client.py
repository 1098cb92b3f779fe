# Copyright (c) FieldOps.
# Licensed under the MIT license.

import unittest
from unittest.mock import patch

from FieldOps.Crm import CrmClient
from FieldOps.Crm.core.config import CrmConfig
from FieldOps.Crm.data._api import _ApiClient
from FieldOps.Crm.operations.assets import AssetOperations
from FieldOps.Crm.operations.directory import DirectoryOperations
from FieldOps.Crm.operations.jobs import JobOperations
from FieldOps.Crm.operations.products import ProductOperations
from FieldOps.Crm.operations.records import RecordOperations
from FieldOps.Crm.operations.templates import TemplateOperations


class TestCrmClient(unittest.TestCase):
    """
    Unit tests for CrmClient construction and lazy initialization.
    """

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.base_url = "https://api.example.com"
        self.config = CrmConfig(http_timeout=5)

    def test_namespaces(self):
        client = CrmClient(self.base_url, "k", "s", self.config)
        self.assertIsInstance(client.templates, TemplateOperations)
        self.assertIsInstance(client.records, RecordOperations)
        self.assertIsInstance(client.assets, AssetOperations)
        self.assertIsInstance(client.products, ProductOperations)
        self.assertIsInstance(client.jobs, JobOperations)
        self.assertIsInstance(client.directory, DirectoryOperations)

    def test_empty_base_url_rejected(self):
        for base in ("", "   ", None):
            with self.assertRaises(ValueError):
                CrmClient(base, "k", "s")

    def test_empty_credentials_rejected(self):
        with self.assertRaises(ValueError):
            CrmClient(self.base_url, "", "s")
        with self.assertRaises(ValueError):
            CrmClient(self.base_url, "k", None)

    def test_api_client_is_lazy(self):
        client = CrmClient(self.base_url, "k", "s", self.config)
        self.assertIsNone(client._api)

        api = client._get_api()

        self.assertIsInstance(api, _ApiClient)
        self.assertIs(client._get_api(), api)
        self.assertIs(api.config, self.config)
        self.assertEqual(api._url("/data"), "https://api.example.com/v1/data")
        self.assertEqual(api._router.headers(), {"key": "k", "secret": "s"})

    @patch("FieldOps.Crm.client.CrmConfig.from_env")
    def test_config_defaults_from_env(self, mock_from_env):
        mock_from_env.return_value = CrmConfig(timezone="UTC")
        client = CrmClient(self.base_url, "k", "s")
        mock_from_env.assert_called_once_with()
        self.assertEqual(client._get_api().config.timezone, "UTC")


if __name__ == "__main__":
    unittest.main()
