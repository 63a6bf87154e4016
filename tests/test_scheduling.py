"""
HTTP tests for /scheduling: manual pickup creation and the owner overview
"""
import unittest
from datetime import date, timedelta

from tests.base import AppTestCase, OWNER_EMAIL
from ewtrack.extensions import db
from ewtrack.models.item import Item
from ewtrack.models.pickup import Pickup


class TestSchedulePickup(AppTestCase):

    def setUp(self):
        super().setUp()
        self.vendor = self.make_vendor()
        self.laptop = self.make_item(name='Laptop')
        self.printer = self.make_item(
            name='Printer',
            pickup_address='5 Residency Road',
            pickup_landmark='Opp. Bus Stop',
            pickup_latitude=12.97,
            pickup_longitude=77.61,
        )

    def test_empty_item_ids_returns_400(self):
        for body in ({'vendorId': self.vendor.id}, {'itemIds': [], 'vendorId': self.vendor.id}):
            response = self.client.post('/scheduling', json=body)
            self.assertEqual(response.status_code, 400)

    def test_missing_vendor_returns_400(self):
        response = self.client.post('/scheduling', json={'itemIds': [self.laptop.id]})
        self.assertEqual(response.status_code, 400)

    def test_non_string_vendor_id_returns_400(self):
        for vendor_id in ({'x': 1}, [self.vendor.id], 42):
            response = self.client.post('/scheduling', json={'itemIds': [self.laptop.id], 'vendorId': vendor_id})
            self.assertEqual(response.status_code, 400)
        self.assertEqual(Pickup.query.count(), 0)

    def test_explicit_address_requires_coordinates(self):
        bad = [
            {'latitude': 'north', 'longitude': 77.6},
            {'latitude': 12.9},
            {'latitude': 95, 'longitude': 77.6},
        ]
        for coords in bad:
            body = {'itemIds': [self.laptop.id], 'vendorId': self.vendor.id, 'address': '12 MG Road'}
            body.update(coords)
            response = self.client.post('/scheduling', json=body)
            self.assertEqual(response.status_code, 400)
        self.assertEqual(Pickup.query.count(), 0)
        self.refresh()
        self.assertEqual(db.session.get(Item, self.laptop.id).status, 'Reported')

        response = self.client.post('/scheduling', json={
            'itemIds': [self.laptop.id], 'vendorId': self.vendor.id,
            'address': '12 MG Road', 'latitude': '12.9', 'longitude': 77.6,
        })
        self.assertEqual(response.status_code, 201)
        data = response.get_json()
        self.assertEqual((data['latitude'], data['longitude']), (12.9, 77.6))
        self.assertEqual(data['landmark'], 'N/A')

    def test_unknown_item_returns_404(self):
        response = self.client.post('/scheduling', json={'itemIds': ['f' * 32], 'vendorId': self.vendor.id})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(Pickup.query.count(), 0)

    def test_creates_pickup_and_schedules_items(self):
        response = self.client.post('/scheduling', json={
            'itemIds': [self.laptop.id, self.printer.id],
            'vendorId': self.vendor.id,
            'notes': 'Use the side gate',
            'date': '1999-01-01',
        })
        self.assertEqual(response.status_code, 201)
        data = response.get_json()
        self.assertEqual(data['itemIds'], [self.laptop.id, self.printer.id])
        self.assertEqual(data['notes'], 'Use the side gate')
        self.assertEqual(data['createdBy'], OWNER_EMAIL)
        # Client dates are ignored
        self.assertEqual(data['date'], (date.today() + timedelta(days=3)).isoformat())
        # Address comes from the first item that has one
        self.assertEqual(data['address'], '5 Residency Road')
        self.assertEqual(data['landmark'], 'Opp. Bus Stop')

        self.refresh()
        for item_id in (self.laptop.id, self.printer.id):
            item = db.session.get(Item, item_id)
            self.assertEqual(item.status, 'Scheduled')
            self.assertEqual(item.pickup_id, data['id'])

    def test_batch_with_already_scheduled_item_returns_existing(self):
        first = self.client.post('/scheduling', json={'itemIds': [self.laptop.id], 'vendorId': self.vendor.id})
        self.assertEqual(first.status_code, 201)

        second = self.client.post('/scheduling', json={
            'itemIds': [self.printer.id, self.laptop.id],
            'vendorId': self.vendor.id,
        })
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.get_json()['id'], first.get_json()['id'])
        self.assertEqual(second.get_json()['itemIds'], [self.laptop.id])

        self.refresh()
        self.assertEqual(Pickup.query.count(), 1)
        self.assertEqual(db.session.get(Item, self.printer.id).status, 'Reported')

    def test_address_path_after_manual_schedule_does_not_duplicate(self):
        self.client.post('/scheduling', json={'itemIds': [self.laptop.id], 'vendorId': self.vendor.id})
        response = self.client.post('/pickups/update-address', json={
            'itemId': self.laptop.id, 'address': '12 MG Road', 'landmark': '',
            'lat': 12.9, 'lng': 77.6, 'vendorId': self.vendor.id,
        })
        self.assertIsNone(response.get_json()['pickupId'])
        self.refresh()
        self.assertEqual(Pickup.query.count(), 1)
        self.assertEqual(Pickup.query.first().address, '12 MG Road')


class TestSchedulingOverview(AppTestCase):

    def test_user_email_required(self):
        response = self.client.get('/scheduling')
        self.assertEqual(response.status_code, 400)

    def test_overview_populates_pickups(self):
        self.make_vendor(name='Zeta Metals')
        self.make_vendor(name='Alpha Recyclers')
        vendor_user = self.make_user(email='ravi@recyclers.in', role='vendor', name='Ravi Recyclers')
        scheduled = self.make_item(name='Server Rack')
        self.make_item(name='Old Draft', status='Draft')
        self.make_item(name='Someone Else', created_by='other@example.com')

        self.client.post('/scheduling', json={'itemIds': [scheduled.id], 'vendorId': vendor_user.id})
        reported = self.make_item(name='Keyboard')

        response = self.client.get(f'/scheduling?userEmail={OWNER_EMAIL}')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()

        self.assertEqual([v['name'] for v in data['vendors']], ['Alpha Recyclers', 'Zeta Metals'])
        names = {i['name'] for i in data['schedulableItems']}
        self.assertEqual(names, {'Server Rack', 'Keyboard'})
        self.assertIn(reported.id, {i['id'] for i in data['schedulableItems']})

        self.assertEqual(len(data['pickups']), 1)
        populated = data['populatedPickups'][0]
        self.assertEqual(populated['vendorName'], 'Ravi Recyclers')
        self.assertEqual(populated['itemIds'][0]['id'], scheduled.id)
        self.assertEqual(populated['itemIds'][0]['name'], 'Server Rack')

    def test_unknown_vendor_name(self):
        item = self.make_item()
        self.client.post('/scheduling', json={'itemIds': [item.id], 'vendorId': 'a' * 32})
        data = self.client.get(f'/scheduling?userEmail={OWNER_EMAIL}').get_json()
        self.assertEqual(data['populatedPickups'][0]['vendorName'], 'Unknown Vendor')


if __name__ == '__main__':
    unittest.main()
