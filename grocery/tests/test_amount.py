import unittest
from grocery.domain.Amount import Numeric, Freeform, parse_amount


class TestAmount(unittest.TestCase):

    def test_parse_numeric(self):
        self.assertEqual(parse_amount("2"), Numeric(2))
        self.assertEqual(parse_amount(" 0.5 "), Numeric(0.5))
        self.assertEqual(parse_amount(".25"), Numeric(0.25))
        self.assertEqual(parse_amount("1e3"), Numeric(1000))
        self.assertEqual(parse_amount(3), Numeric(3))

    def test_parse_freeform_keeps_raw_text(self):
        for raw in ("to taste", "", "1/2", "2 large", "3-4", "nan", "inf", "1e999"):
            amount = parse_amount(raw)
            self.assertIsInstance(amount, Freeform, raw)
            self.assertEqual(amount.format(), raw)
        self.assertEqual(parse_amount(None), Freeform(""))

    def test_format_natural_decimal(self):
        self.assertEqual(Numeric(3.0).format(), "3")
        self.assertEqual(Numeric(1.5).format(), "1.5")
        self.assertEqual(Numeric(0.1).plus(Numeric(0.2)).format(), "0.30000000000000004")
        self.assertEqual(Numeric(0.5).scaled(3).format(), "1.5")

    def test_format_small_values_positionally(self):
        self.assertEqual(Numeric(0.00005).format(), "0.00005")
        self.assertEqual(Numeric(0.000001).format(), "0.000001")
        self.assertEqual(Numeric(1.5e-7).format(), "1.5e-07")
        self.assertEqual(Numeric(0.25).scaled(0.001).format(), "0.00025")

    def test_variant_flag(self):
        self.assertTrue(parse_amount("1").is_numeric)
        self.assertFalse(parse_amount("a pinch").is_numeric)
