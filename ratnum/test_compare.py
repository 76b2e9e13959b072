"""
Testing ratnum compare.py
"""

import fractions
import itertools
import unittest

from ratnum import Rational
from ratnum import Verdict
from ratnum import compare
from ratnum import limb


RADIX = limb.RADIX


def r(numerator, denominator=1):
    return Rational(numerator) / Rational(denominator)


# In ascending order, all distinct values.
ASCENDING = [
    (-(2**70), 3),
    (-7, 1),
    (-1, 3),
    (-1, 4),
    (1, 7),
    (1, 1),
    (5, 2),
    (RADIX, 1),
    (2**70, 3),
]


class CompareTests(unittest.TestCase):

    def ascending(self):
        return [r(numerator, denominator) for numerator, denominator in ASCENDING]

    def assertRelations(self, left, right, eq, ne, lt, le, gt, ge):
        self.assertEqual(eq, left == right, "{} == {}".format(left.dump(), right.dump()))
        self.assertEqual(ne, left != right, "{} != {}".format(left.dump(), right.dump()))
        self.assertEqual(lt, left < right, "{} < {}".format(left.dump(), right.dump()))
        self.assertEqual(le, left <= right, "{} <= {}".format(left.dump(), right.dump()))
        self.assertEqual(gt, left > right, "{} > {}".format(left.dump(), right.dump()))
        self.assertEqual(ge, left >= right, "{} >= {}".format(left.dump(), right.dump()))


class CompareOrdinaryTests(CompareTests):

    def test_three_five(self):
        self.assertRelations(Rational(3), Rational(5), eq=False, ne=True, lt=True, le=True, gt=False, ge=False)
        self.assertRelations(Rational(5), Rational(3), eq=False, ne=True, lt=False, le=False, gt=True, ge=True)
        self.assertRelations(Rational(3), Rational(3), eq=True, ne=False, lt=False, le=True, gt=False, ge=True)

    def test_ascending(self):
        values = self.ascending()
        for (i, left), (j, right) in itertools.product(enumerate(values), repeat=2):
            self.assertEqual(i < j, left < right)
            self.assertEqual(i == j, left == right)
            self.assertEqual(i > j, left > right)
            self.assertEqual(i <= j, left <= right)
            self.assertEqual(i >= j, left >= right)
            self.assertEqual(i != j, left != right)

    def test_totality(self):
        """Exactly one of <, ==, > for distinct ordinary values."""
        values = self.ascending()
        for left, right in itertools.combinations(values, 2):
            for a, b in ((left, right), (right, left)):
                self.assertEqual(1, [a < b, a == b, a > b].count(True))

    def test_agrees_with_fraction(self):
        values = self.ascending()
        for left, right in itertools.product(values, repeat=2):
            self.assertEqual(left.fraction() < right.fraction(), left < right)
            self.assertEqual(left.fraction() == right.fraction(), left == right)

    def test_unreduced_equal(self):
        six_halves = Rational.from_parts(Rational.POSITIVE, 1, [6], 1, [2])
        self.assertEqual(Rational(3), six_halves)
        self.assertNotEqual(Rational(3).den, six_halves.den)
        self.assertFalse(Rational(3) < six_halves)
        self.assertFalse(Rational(3) > six_halves)

    def test_different_exponents(self):
        self.assertTrue(Rational(RADIX) > Rational(5))
        self.assertTrue(Rational(-RADIX) < Rational(-5))
        self.assertTrue(r(1, RADIX) < r(1, 5))
        self.assertTrue(r(-1, RADIX) > r(-1, 5))

    def test_same_exponent_longer_vector(self):
        shorter = Rational.from_parts(Rational.POSITIVE, 2, [1, 2], 1, [1])
        longer = Rational.from_parts(Rational.POSITIVE, 2, [1, 2, 3], 1, [1])
        self.assertTrue(shorter < longer)
        self.assertTrue(longer > shorter)
        self.assertTrue(shorter.negate() > longer.negate())

    def test_mixed_signs(self):
        self.assertRelations(Rational(-1), Rational(1), eq=False, ne=True, lt=True, le=True, gt=False, ge=False)
        self.assertRelations(Rational(1), Rational(-1), eq=False, ne=True, lt=False, le=False, gt=True, ge=True)
        self.assertTrue(Rational(-RADIX) < Rational(1))

    def test_negative_magnitudes(self):
        self.assertTrue(Rational(-5) < Rational(-3))
        self.assertTrue(Rational(-3) > Rational(-5))
        self.assertTrue(r(-1, 3) < r(-1, 4))

    def test_native_ints(self):
        self.assertTrue(Rational(3) == 3)
        self.assertTrue(3 == Rational(3))
        self.assertTrue(Rational(3) < 4)
        self.assertTrue(4 > Rational(3))
        self.assertTrue(r(7, 2) >= 3)

    def test_unsupported_type(self):
        self.assertFalse(Rational(1) == 'one')
        self.assertTrue(Rational(1) != 'one')
        self.assertFalse(Rational(1) == None)
        self.assertFalse(Rational(1) == 1.0)
        with self.assertRaises(TypeError):
            _ = Rational(1) < 'one'
        with self.assertRaises(TypeError):
            _ = Rational(1) >= 1.0


class CompareSpecialTests(CompareTests):

    def test_zero(self):
        zero = Rational.zero()
        self.assertRelations(zero, Rational(0), eq=True, ne=False, lt=False, le=True, gt=False, ge=True)
        self.assertRelations(zero, Rational(3), eq=False, ne=True, lt=True, le=True, gt=False, ge=False)
        self.assertRelations(zero, Rational(-3), eq=False, ne=True, lt=False, le=False, gt=True, ge=True)
        self.assertRelations(Rational(3), zero, eq=False, ne=True, lt=False, le=False, gt=True, ge=True)
        self.assertRelations(Rational(-3), zero, eq=False, ne=True, lt=True, le=True, gt=False, ge=False)

    def test_negative_zero(self):
        minus_zero = -Rational.zero()
        self.assertEqual(Rational.NEGATIVE, minus_zero.sign)
        self.assertRelations(minus_zero, Rational.zero(), eq=True, ne=False, lt=False, le=True, gt=False, ge=True)
        self.assertTrue(minus_zero < 1)
        self.assertTrue(minus_zero > -1)

    def test_nan(self):
        nan = Rational.nan()
        self.assertRelations(nan, Rational.nan(), eq=True, ne=False, lt=False, le=True, gt=False, ge=True)
        self.assertRelations(nan, Rational(1), eq=False, ne=True, lt=False, le=True, gt=False, ge=True)
        self.assertRelations(Rational(1), nan, eq=False, ne=True, lt=False, le=True, gt=False, ge=True)
        self.assertRelations(nan, Rational.zero(), eq=False, ne=True, lt=False, le=True, gt=False, ge=True)

    def test_undefined(self):
        undefined = Rational.undefined()
        for other in [Rational.undefined(), Rational.zero(), Rational.nan(), Rational(1), Rational(-1)]:
            self.assertRelations(undefined, other, eq=False, ne=True, lt=False, le=True, gt=False, ge=True)
            self.assertRelations(other, undefined, eq=False, ne=True, lt=False, le=True, gt=False, ge=True)

    def test_undefined_not_equal_to_itself(self):
        undefined = Rational.undefined()
        self.assertFalse(undefined == undefined)
        self.assertTrue(undefined != undefined)


class CompareCheckTests(CompareTests):

    def test_equal_check(self):
        self.assertEqual(Verdict.FAIL, compare.equal_check(Rational.undefined(), Rational.undefined()))
        self.assertEqual(Verdict.PASS, compare.equal_check(Rational.zero(), Rational.zero()))
        self.assertEqual(Verdict.PASS, compare.equal_check(Rational.nan(), Rational.nan()))
        self.assertEqual(Verdict.FAIL, compare.equal_check(Rational.zero(), Rational.nan()))
        self.assertEqual(Verdict.FAIL, compare.equal_check(Rational(1), Rational.zero()))
        self.assertEqual(Verdict.FAIL, compare.equal_check(Rational(1), Rational(-1)))
        self.assertEqual(Verdict.MUST_COMPARE, compare.equal_check(Rational(1), Rational(2)))

    def test_less_check(self):
        self.assertEqual(Verdict.FAIL, compare.less_check(Rational.undefined(), Rational(1)))
        self.assertEqual(Verdict.FAIL, compare.less_check(Rational.zero(), Rational.zero()))
        self.assertEqual(Verdict.FAIL, compare.less_check(Rational.nan(), Rational.nan()))
        self.assertEqual(Verdict.PASS, compare.less_check(Rational(-1), Rational(1)))
        self.assertEqual(Verdict.FAIL, compare.less_check(Rational(1), Rational(-1)))
        self.assertEqual(Verdict.PASS, compare.less_check(Rational.zero(), Rational(1)))
        self.assertEqual(Verdict.MUST_COMPARE, compare.less_check(Rational(-1), Rational(-2)))

    def test_more_check(self):
        self.assertEqual(Verdict.FAIL, compare.more_check(Rational(1), Rational.undefined()))
        self.assertEqual(Verdict.FAIL, compare.more_check(Rational.zero(), Rational.zero()))
        self.assertEqual(Verdict.PASS, compare.more_check(Rational(1), Rational(-1)))
        self.assertEqual(Verdict.FAIL, compare.more_check(Rational(-1), Rational(1)))
        self.assertEqual(Verdict.PASS, compare.more_check(Rational(1), Rational.zero()))
        self.assertEqual(Verdict.MUST_COMPARE, compare.more_check(Rational(2), Rational(1)))

    def test_magnitude_order(self):
        self.assertEqual(-1, compare.magnitude_order(Rational(3), Rational(5)))
        self.assertEqual(0, compare.magnitude_order(Rational(5), Rational(5)))
        self.assertEqual(1, compare.magnitude_order(Rational(5), Rational(3)))
        self.assertEqual(1, compare.magnitude_order(Rational(-5), Rational(3)))
        self.assertEqual(0, compare.magnitude_order(r(1, 3), Rational.from_parts(Rational.POSITIVE, 1, [2], 1, [6])))

    def test_magnitude_order_matches_fraction(self):
        values = self.ascending()
        for left, right in itertools.product(values, repeat=2):
            left_magnitude = abs(left.fraction())
            right_magnitude = abs(right.fraction())
            expected = (left_magnitude > right_magnitude) - (left_magnitude < right_magnitude)
            self.assertEqual(expected, compare.magnitude_order(left, right))

    def test_relation_functions(self):
        self.assertTrue(compare.equal(Rational(2), r(4, 2)))
        self.assertTrue(compare.not_equal(Rational(2), Rational(3)))
        self.assertTrue(compare.less(Rational(2), Rational(3)))
        self.assertTrue(compare.less_equal(Rational(2), Rational(2)))
        self.assertTrue(compare.more(Rational(3), Rational(2)))
        self.assertTrue(compare.more_equal(Rational(3), Rational(3)))


class CompareFractionSanityTests(CompareTests):

    def test_fraction_cross_check(self):
        """The expected order of ASCENDING, by fractions.Fraction."""
        fractions_in_order = [fractions.Fraction(n, d) for n, d in ASCENDING]
        self.assertEqual(sorted(fractions_in_order), fractions_in_order)


if __name__ == '__main__':
    unittest.main()
