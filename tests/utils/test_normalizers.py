"""
Unit tests for OFX field normalizers.
"""
import unittest
from datetime import date
from decimal import Decimal

from ofx_import.utils.normalizers import parse_ofx_amount, parse_ofx_date


class TestParseOfxDate(unittest.TestCase):
    def test_plain_eight_digits(self):
        self.assertEqual(parse_ofx_date('20240115'), date(2024, 1, 15))

    def test_suffix_is_ignored(self):
        """Time of day and timezone suffixes do not change the date."""
        test_cases = [
            '20240115120000',
            '20240115120000.000',
            '20240115120000[-03:BRT]',
            '20240115235959[+12:NZST]',
            '20240115000000[-5:EST]',
        ]
        for raw in test_cases:
            with self.subTest(raw=raw):
                self.assertEqual(parse_ofx_date(raw), parse_ofx_date(raw[:8]))

    def test_no_timezone_shift(self):
        # Late evening with a negative offset would roll over in UTC
        self.assertEqual(parse_ofx_date('20240131235959[-03:BRT]'), date(2024, 1, 31))

    def test_missing_or_short(self):
        for raw in [None, '', '2024011', 'not-a-date', '2024-01-15']:
            with self.subTest(raw=raw):
                self.assertIsNone(parse_ofx_date(raw))

    def test_impossible_calendar_date(self):
        self.assertIsNone(parse_ofx_date('20241340'))
        self.assertIsNone(parse_ofx_date('20230229'))

    def test_leap_day(self):
        self.assertEqual(parse_ofx_date('20240229'), date(2024, 2, 29))

    def test_only_ascii_digits(self):
        self.assertIsNone(parse_ofx_date('\u0662\u0660\u0662\u0664\u0660\u0661\u0661\u0665'))
        self.assertIsNone(parse_ofx_date('\uff12\uff10\uff12\uff14\uff10\uff11\uff11\uff15'))


class TestParseOfxAmount(unittest.TestCase):
    def test_comma_and_period_separators_match(self):
        self.assertEqual(parse_ofx_amount('123,45'), parse_ofx_amount('123.45'))
        self.assertEqual(parse_ofx_amount('123,45'), Decimal('123.45'))

    def test_sign_preserved(self):
        self.assertEqual(parse_ofx_amount('-45.90'), Decimal('-45.90'))
        self.assertEqual(parse_ofx_amount('+10.00'), Decimal('10.00'))

    def test_no_rounding(self):
        self.assertEqual(str(parse_ofx_amount('0.125')), '0.125')

    def test_surrounding_whitespace(self):
        self.assertEqual(parse_ofx_amount('  -7.5 '), Decimal('-7.5'))

    def test_unparseable_becomes_zero(self):
        for raw in [None, '', 'abc', '1.000,00', 'NaN', 'Infinity']:
            with self.subTest(raw=raw):
                self.assertEqual(parse_ofx_amount(raw), Decimal(0))

    def test_zero(self):
        self.assertEqual(parse_ofx_amount('0.00'), Decimal(0))

    def test_non_ofx_numeric_syntax_becomes_zero(self):
        """Python numeric extensions are not OFX amounts."""
        for raw in ['1_000', '\uff11\uff12', '\u0661\u0662.50', '-inf', 'sNaN', '12 34']:
            with self.subTest(raw=raw):
                self.assertEqual(parse_ofx_amount(raw), Decimal(0))

    def test_exponent_and_bare_fraction(self):
        self.assertEqual(parse_ofx_amount('.50'), Decimal('0.50'))
        self.assertEqual(parse_ofx_amount('1E2'), Decimal(100))


if __name__ == '__main__':
    unittest.main()
