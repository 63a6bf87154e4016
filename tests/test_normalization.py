"""
Unit tests for the pure normalization helpers
"""
import unittest
import sys
import os
from datetime import date

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ewtrack.helpers.normalization import (
    normalize_landmark,
    pickup_target_date,
    compose_pickup_note,
    parse_latitude,
    parse_longitude,
    is_valid_id,
    new_id,
    dedupe_ids,
)


class TestNormalizeLandmark(unittest.TestCase):

    def test_blank_values_become_placeholder(self):
        for value in (None, '', '   ', '\t\n'):
            self.assertEqual(normalize_landmark(value), 'N/A')

    def test_value_is_trimmed(self):
        self.assertEqual(normalize_landmark('  Near City Mall '), 'Near City Mall')


class TestPickupTargetDate(unittest.TestCase):

    def test_default_offset_is_three_days(self):
        self.assertEqual(pickup_target_date(today=date(2026, 10, 19)), '2026-10-22')

    def test_offset_crosses_month_and_year(self):
        self.assertEqual(pickup_target_date(today=date(2026, 12, 30), offset_days=3), '2027-01-02')

    def test_uses_local_calendar_date(self):
        expected = date.today().toordinal() + 5
        self.assertEqual(pickup_target_date(offset_days=5), date.fromordinal(expected).isoformat())


class TestComposePickupNote(unittest.TestCase):

    def test_without_bid(self):
        self.assertEqual(compose_pickup_note(None), 'Pickup for auction winner.')
        self.assertEqual(compose_pickup_note(0), 'Pickup for auction winner.')

    def test_with_integral_bid(self):
        self.assertEqual(compose_pickup_note(1500.0), 'Pickup for auction winner. Final bid: ₹1500')

    def test_with_fractional_bid(self):
        self.assertEqual(compose_pickup_note(1250.5), 'Pickup for auction winner. Final bid: ₹1250.5')


class TestCoordinates(unittest.TestCase):

    def test_accepts_numbers_and_numeric_strings(self):
        self.assertEqual(parse_latitude(12.9), 12.9)
        self.assertEqual(parse_longitude('77.6'), 77.6)
        self.assertEqual(parse_latitude(0), 0.0)

    def test_rejects_unusable_values(self):
        for value in (None, True, 'abc', float('nan'), 91, -90.5):
            self.assertIsNone(parse_latitude(value))
        self.assertIsNone(parse_longitude(180.1))


class TestIds(unittest.TestCase):

    def test_new_ids_are_valid_and_distinct(self):
        first, second = new_id(), new_id()
        self.assertTrue(is_valid_id(first))
        self.assertNotEqual(first, second)

    def test_malformed_ids(self):
        for value in (None, '', '123', 'z' * 32, 42):
            self.assertFalse(is_valid_id(value))

    def test_dedupe_keeps_first_occurrence(self):
        self.assertEqual(dedupe_ids(['b', 'a', ' b ', '', None, 'c']), ['b', 'a', 'c'])


if __name__ == '__main__':
    unittest.main()
