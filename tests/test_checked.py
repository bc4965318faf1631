import itertools
import unittest

from exactratio import (
    INT64,
    AddOverflow,
    IntegerDomain,
    MulOverflow,
    OutOfRange,
    RatioArithmeticError,
    SubUnderflow,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
)

INT8 = IntegerDomain(8)


class CheckedArithmeticTests(unittest.TestCase):
    def test_add_at_the_edges(self):
        self.assertEqual(checked_add(100, 27, domain=INT8), 127)
        self.assertEqual(checked_add(-100, -28, domain=INT8), -128)
        with self.assertRaises(AddOverflow):
            checked_add(100, 28, domain=INT8)
        with self.assertRaises(AddOverflow):
            checked_add(-100, -29, domain=INT8)

    def test_sub_at_the_edges(self):
        self.assertEqual(checked_sub(-100, 28, domain=INT8), -128)
        self.assertEqual(checked_sub(100, -27, domain=INT8), 127)
        with self.assertRaises(SubUnderflow):
            checked_sub(-100, 29, domain=INT8)
        with self.assertRaises(SubUnderflow):
            checked_sub(100, -28, domain=INT8)

    def test_subtracting_min_always_fails(self):
        for a in (-128, -1, 0, 5):
            with self.assertRaises(SubUnderflow):
                checked_sub(a, -128, domain=INT8)
        with self.assertRaises(SubUnderflow):
            checked_neg(-128, domain=INT8)
        self.assertEqual(checked_neg(127, domain=INT8), -127)

    def test_mul_at_the_edges(self):
        self.assertEqual(checked_mul(-128, 1, domain=INT8), -128)
        self.assertEqual(checked_mul(-64, 2, domain=INT8), -128)
        for a, b in ((64, 2), (-128, -1), (16, 8), (-12, -11)):
            with self.assertRaises(MulOverflow):
                checked_mul(a, b, domain=INT8)

    def test_errors_are_arithmetic_errors(self):
        with self.assertRaises(ArithmeticError):
            checked_mul(64, 2, domain=INT8)
        with self.assertRaises(RatioArithmeticError):
            checked_add(127, 1, domain=INT8)
        with self.assertRaises(OverflowError):
            checked_sub(-128, 1, domain=INT8)

    def test_operands_must_be_in_domain(self):
        with self.assertRaises(OutOfRange):
            checked_add(200, 1, domain=INT8)
        with self.assertRaises(OutOfRange):
            checked_mul(1, -129, domain=INT8)

    def test_default_domain(self):
        with self.assertRaises(AddOverflow):
            checked_add(INT64.max, 1, domain=INT64)
        with self.assertRaises(MulOverflow):
            checked_mul(2**32, 2**31, domain=INT64)
        self.assertEqual(checked_mul(-(2**32), 2**31, domain=INT64), INT64.min)

    def test_exhaustive_small_domain(self):
        values = range(INT8.min, INT8.max + 1)
        for a, b in itertools.product(values, repeat=2):
            for op, exact, error in (
                (checked_add, a + b, AddOverflow),
                (checked_mul, a * b, MulOverflow),
            ):
                if INT8.contains(exact):
                    self.assertEqual(op(a, b, domain=INT8), exact)
                else:
                    with self.assertRaises(error):
                        op(a, b, domain=INT8)
            if b != INT8.min and INT8.contains(a - b):
                self.assertEqual(checked_sub(a, b, domain=INT8), a - b)
            else:
                with self.assertRaises(SubUnderflow):
                    checked_sub(a, b, domain=INT8)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
