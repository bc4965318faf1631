import unittest

from exactratio import (
    CENTI,
    DECA,
    DECI,
    GIGA,
    HECTO,
    INT32,
    INT64,
    INT128,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    NANO,
    SI_PREFIXES,
    Rational,
    si_prefixes,
)


class SIPrefixTests(unittest.TestCase):
    def test_core_table(self):
        expected = {
            NANO: (1, 10**9),
            MICRO: (1, 10**6),
            MILLI: (1, 1000),
            CENTI: (1, 100),
            DECI: (1, 10),
            DECA: (10, 1),
            HECTO: (100, 1),
            KILO: (1000, 1),
            MEGA: (10**6, 1),
            GIGA: (10**9, 1),
        }
        for constant, ratio in expected.items():
            self.assertEqual(constant.as_integer_ratio(), ratio)

    def test_default_table_matches_constants(self):
        self.assertIs(SI_PREFIXES["kilo"], KILO)
        self.assertEqual(SI_PREFIXES["nano"], Rational(1, 10**9))

    def test_prefixes_compose(self):
        self.assertEqual(MILLI * KILO, 1)
        self.assertEqual(GIGA / MEGA, KILO)
        self.assertEqual(MICRO * MILLI, NANO)
        self.assertTrue(CENTI < DECI < DECA)

    def test_width_selects_entries(self):
        narrow = si_prefixes(INT32)
        self.assertIn("giga", narrow)
        self.assertIn("nano", narrow)
        self.assertNotIn("tera", narrow)
        self.assertNotIn("pico", narrow)

        wide = si_prefixes(INT64)
        self.assertEqual(wide["exa"], Rational(10**18, domain=INT64))
        self.assertEqual(wide["atto"], Rational(1, 10**18, domain=INT64))
        self.assertNotIn("zetta", wide)

        widest = si_prefixes(INT128)
        self.assertEqual(widest["yotta"].numerator, 10**24)
        self.assertEqual(widest["yocto"].denominator, 10**24)
        self.assertEqual(len(widest), 20)

    def test_entries_carry_the_domain(self):
        self.assertTrue(all(value.domain is INT32 for value in si_prefixes(INT32).values()))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            SI_PREFIXES["kilo"] = Rational(1)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
