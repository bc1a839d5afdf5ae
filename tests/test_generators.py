"""
Tests for the random value generators.
"""
import re
import unittest
from datetime import date, datetime, timedelta
from unittest.mock import patch

from generators import format_date, random_date, random_element, random_int, random_phone_number


class TestGenerators(unittest.TestCase):

    def test_random_int_stays_in_inclusive_range(self):
        values = {random_int(1, 3) for _ in range(300)}
        self.assertEqual(values, {1, 2, 3})

    def test_random_int_rounds_bounds_inward(self):
        for _ in range(100):
            self.assertIn(random_int(1.2, 3.8), (2, 3))

    def test_random_int_single_value(self):
        self.assertEqual(random_int(5, 5), 5)

    def test_random_int_without_integer_in_range(self):
        self.assertEqual(random_int(1.2, 1.8), 2)

    def test_random_element_empty(self):
        self.assertIsNone(random_element([]))
        self.assertIsNone(random_element(None))

    def test_random_element_picks_member(self):
        items = ["a", "b", "c"]
        for _ in range(20):
            self.assertIn(random_element(items), items)

    def test_random_date_within_bounds(self):
        start = datetime(2024, 1, 1)
        end = start + timedelta(days=30)
        for _ in range(50):
            value = random_date(start, end)
            self.assertTrue(start <= value <= end)

    @patch('generators.random.random', return_value=0.5)
    def test_random_date_uses_uniform_fraction(self, _):
        start = datetime(2024, 1, 1)
        self.assertEqual(random_date(start, start + timedelta(days=2)), datetime(2024, 1, 2))

    def test_format_date(self):
        self.assertEqual(format_date(datetime(2024, 3, 5, 23, 59)), "2024-03-05")
        self.assertEqual(format_date(date(1999, 12, 31)), "1999-12-31")

    def test_random_phone_number_format(self):
        self.assertRegex(random_phone_number(), re.compile(r"^\d{3}-\d{3}-\d{4}$"))


if __name__ == '__main__':
    unittest.main()
