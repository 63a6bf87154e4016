"""
Tests for application configuration
"""
import importlib
import os
import sys
import unittest
from datetime import date, timedelta
from unittest import mock

from tests.base import AppTestCase, TEST_CONFIG
from ewtrack import create_app
from ewtrack.config import Config, _int_env


class TestConfig(unittest.TestCase):

    def test_database_url_is_required(self):
        with self.assertRaises(RuntimeError):
            create_app({'SQLALCHEMY_DATABASE_URI': None})

    def test_int_env(self):
        with mock.patch.dict(os.environ, {'PICKUP_DATE_OFFSET_DAYS': '7'}):
            self.assertEqual(_int_env('PICKUP_DATE_OFFSET_DAYS', 3), 7)
        with mock.patch.dict(os.environ, {'PICKUP_DATE_OFFSET_DAYS': 'soon'}):
            self.assertEqual(_int_env('PICKUP_DATE_OFFSET_DAYS', 3), 3)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_int_env('PICKUP_DATE_OFFSET_DAYS', 3), 3)


class TestPickupOffsetConfig(AppTestCase):

    @classmethod
    def setUpClass(cls):
        config = dict(TEST_CONFIG, PICKUP_DATE_OFFSET_DAYS=5)
        cls.app = create_app(config)

    def test_offset_applies_to_manual_scheduling(self):
        vendor = self.make_vendor()
        item = self.make_item()
        response = self.client.post('/scheduling', json={'itemIds': [item.id], 'vendorId': vendor.id})
        self.assertEqual(response.get_json()['date'], (date.today() + timedelta(days=5)).isoformat())

    def test_unknown_route_is_json_404(self):
        response = self.client.get('/no-such-page')
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.get_json()['success'])


class TestWsgiBootstrap(unittest.TestCase):

    def test_env_source_is_logged(self):
        sys.modules.pop('wsgi', None)
        with mock.patch.object(Config, 'SQLALCHEMY_DATABASE_URI', 'sqlite:///:memory:'):
            with self.assertLogs('ewtrack.wsgi', level='INFO') as logs:
                module = importlib.import_module('wsgi')
        self.assertTrue(any('environment' in line for line in logs.output))
        self.assertEqual(module.app.config['SQLALCHEMY_DATABASE_URI'], 'sqlite:///:memory:')
        sys.modules.pop('wsgi', None)


if __name__ == '__main__':
    unittest.main()
