"""Unit tests for the tax details parser and calculator."""

from __future__ import annotations

import unittest

from taxbot.services.tax_calculator import TaxCalculator
from taxbot.services.tax_details_parser import TaxDetails, TaxDetailsError, parse_tax_details


class ParseTaxDetailsTestCase(unittest.TestCase):
    def test_parses_example_input(self) -> None:
        details = parse_tax_details("hours: 40, rate: 35, state: NY, county: Kings, city: NYC")

        self.assertEqual(
            details,
            TaxDetails(hours=40.0, rate=35.0, state="NY", county="Kings", city="NYC"),
        )

    def test_accepts_any_order_and_separator(self) -> None:
        details = parse_tax_details("city: Austin; state: TX\ncounty:Travis, rate: $22.50, hours:  37.5")

        self.assertEqual(details.hours, 37.5)
        self.assertEqual(details.rate, 22.5)
        self.assertEqual((details.city, details.county, details.state), ("Austin", "Travis", "TX"))

    def test_collapses_whitespace_in_names(self) -> None:
        details = parse_tax_details("hours: 1, rate: 1, state: New   York, county: Kings, city: New York City")

        self.assertEqual(details.state, "New York")
        self.assertEqual(details.city, "New York City")

    def test_ignores_unknown_keys_and_free_text(self) -> None:
        details = parse_tax_details("hi jacob, hours: 8, note: overtime, rate: 10, state: WA, county: King, city: Seattle")

        self.assertEqual(details.hours, 8.0)
        self.assertEqual(details.city, "Seattle")

    def test_labels_without_separators(self) -> None:
        details = parse_tax_details("hours: 40 rate: 35 state: NY county: Kings city: NYC")

        self.assertEqual(
            details,
            TaxDetails(hours=40.0, rate=35.0, state="NY", county="Kings", city="NYC"),
        )

    def test_numbers_followed_by_units(self) -> None:
        details = parse_tax_details("hours: 40 hrs, rate: 35 per hour, state: NY, county: Kings, city: NYC")

        self.assertEqual((details.hours, details.rate), (40.0, 35.0))

    def test_free_text_between_labels(self) -> None:
        details = parse_tax_details(
            "I worked hours: 40 and rate: 35 in state: NY and county: Kings and city: NYC"
        )

        self.assertEqual(
            details,
            TaxDetails(hours=40.0, rate=35.0, state="NY", county="Kings", city="NYC"),
        )

    def test_strips_edge_punctuation_from_places(self) -> None:
        details = parse_tax_details("hours: 40, rate: 35, state: NY!, county: (Kings), city: NYC.")

        self.assertEqual((details.state, details.county, details.city), ("NY", "Kings", "NYC"))

    def test_punctuation_only_place_counts_as_missing(self) -> None:
        with self.assertRaises(TaxDetailsError) as ctx:
            parse_tax_details("hours: 40, rate: 35, state: NY, county: Kings, city: .")

        self.assertIn("city", str(ctx.exception))

    def test_reports_missing_fields(self) -> None:
        with self.assertRaises(TaxDetailsError) as ctx:
            parse_tax_details("hours: 40, rate: 35, state: NY")

        self.assertIn("county", str(ctx.exception))
        self.assertIn("city", str(ctx.exception))
        self.assertNotIn("hours", str(ctx.exception))

    def test_empty_value_counts_as_missing(self) -> None:
        with self.assertRaises(TaxDetailsError) as ctx:
            parse_tax_details("hours: 40, rate: 35, state: NY, county: , city: NYC")

        self.assertIn("county", str(ctx.exception))

    def test_rejects_non_numeric_hours(self) -> None:
        with self.assertRaises(TaxDetailsError) as ctx:
            parse_tax_details("hours: forty, rate: 35, state: NY, county: Kings, city: NYC")

        self.assertIn("'hours'", str(ctx.exception))

    def test_rejects_negative_rate(self) -> None:
        with self.assertRaises(TaxDetailsError):
            parse_tax_details("hours: 40, rate: -35, state: NY, county: Kings, city: NYC")

    def test_free_text_is_an_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_tax_details("I don't have that info")


class TaxCalculatorTestCase(unittest.TestCase):
    def test_flat_rate_estimate(self) -> None:
        estimate = TaxCalculator(federal_rate=0.12, state_rate=0.05).estimate(hours=40, rate=35)

        self.assertAlmostEqual(estimate.gross_pay, 1400.0)
        self.assertAlmostEqual(estimate.taxes, 238.0)
        self.assertAlmostEqual(estimate.net_pay, 1162.0)

    def test_custom_rates(self) -> None:
        calculator = TaxCalculator(federal_rate=0.1, state_rate=0.0)

        self.assertAlmostEqual(calculator.total_rate, 0.1)
        self.assertAlmostEqual(calculator.estimate(hours=10, rate=10).net_pay, 90.0)

    def test_zero_hours(self) -> None:
        estimate = TaxCalculator().estimate(hours=0, rate=50)

        self.assertEqual((estimate.gross_pay, estimate.taxes, estimate.net_pay), (0.0, 0.0, 0.0))


if __name__ == "__main__":
    unittest.main()
