"""
Shared fixtures for the ewtrack test suites
"""
import unittest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ewtrack import create_app
from ewtrack.extensions import db
from ewtrack.models.user import User
from ewtrack.models.vendor import Vendor
from ewtrack.models.item import Item

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SECRET_KEY': 'test-secret',
    'PICKUP_DATE_OFFSET_DAYS': 3,
}

OWNER_EMAIL = 'owner@example.com'
PASSWORD = 'password123'


class AppTestCase(unittest.TestCase):
    """Flask app on an in-memory SQLite database, rebuilt for every test."""

    @classmethod
    def setUpClass(cls):
        cls.app = create_app(TEST_CONFIG)

    def setUp(self):
        self.app_context = self.app.app_context()
        self.app_context.push()
        self.client = self.app.test_client()
        db.create_all()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.app_context.pop()

    def refresh(self):
        """Drop cached state so assertions see what requests committed."""
        db.session.expire_all()

    def make_user(self, email=OWNER_EMAIL, role='user', name=None):
        user = User(email=email, name=name or email.split('@')[0].title(), role=role)
        user.set_password(PASSWORD)
        db.session.add(user)
        db.session.commit()
        return user

    def make_vendor(self, name='GreenCycle', contact='+91 98450 00000', certified=True):
        vendor = Vendor(name=name, contact=contact, certified=certified)
        db.session.add(vendor)
        db.session.commit()
        return vendor

    def make_item(self, created_by=OWNER_EMAIL, **fields):
        values = {
            'name': 'CRT Monitor',
            'department': 'Engineering',
            'category': 'Display',
            'age_months': 60,
            'condition': 'Not working',
            'classification_type': 'Hazardous',
            'status': 'Reported',
            'bidding_status': 'draft',
        }
        values.update(fields)
        item = Item(created_by=created_by, **values)
        db.session.add(item)
        db.session.commit()
        return item

    def login(self, email, password=PASSWORD):
        return self.client.post('/auth/login', json={'email': email, 'password': password})
