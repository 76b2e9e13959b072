"""
Comparison algebra for Rationals.

Each relation starts with a check that settles the special cases without any arithmetic,
returning a Verdict:

    FAIL            the relation is false
    PASS            the relation is true
    MUST_COMPARE    two ordinary values of the same sign, compare magnitudes

Magnitudes compare by cross-multiplying, a/b vs c/d is a*d vs c*b, because fractions are
never reduced to a common form.  Normalized products have no leading zero limbs,
so a bigger exponent always means a bigger magnitude.

Undefined fails every check.  NaN is unordered:  equal to NaN, neither less nor more than anything.
The other three relations are the negations:  != is not ==, <= is not >, >= is not <.
So NaN <= 1 is True, for one.
"""

from .vector import vector_multiply


class Verdict:
    FAIL = 'FAIL'
    PASS = 'PASS'
    MUST_COMPARE = 'MUST_COMPARE'


def _verdict(passes):
    return Verdict.PASS if passes else Verdict.FAIL


def equal_check(left, right):
    """Settle left == right, or leave it to magnitude_order()."""
    if left.is_undefined() or right.is_undefined():
        return Verdict.FAIL
    if left.is_zero() and right.is_zero() or left.is_nan() and right.is_nan():
        return Verdict.PASS
    if not left.is_ordinary() or not right.is_ordinary():
        return Verdict.FAIL
    if left.sign != right.sign:
        return Verdict.FAIL
    return Verdict.MUST_COMPARE


def less_check(left, right):
    """Settle left < right, or leave it to magnitude_order()."""
    if left.is_undefined() or right.is_undefined():
        return Verdict.FAIL
    if left.is_nan() or right.is_nan():
        return Verdict.FAIL
    if left.is_zero() and right.is_zero():
        return Verdict.FAIL
    if left.is_zero():
        return _verdict(right.is_positive())
    if right.is_zero():
        return _verdict(left.is_negative())
    if left.sign != right.sign:
        return _verdict(left.is_negative())
    return Verdict.MUST_COMPARE


def more_check(left, right):
    """Settle left > right, or leave it to magnitude_order()."""
    if left.is_undefined() or right.is_undefined():
        return Verdict.FAIL
    if left.is_nan() or right.is_nan():
        return Verdict.FAIL
    if left.is_zero() and right.is_zero():
        return Verdict.FAIL
    if left.is_zero():
        return _verdict(right.is_negative())
    if right.is_zero():
        return _verdict(left.is_positive())
    if left.sign != right.sign:
        return _verdict(left.is_positive())
    return Verdict.MUST_COMPARE


def magnitude_order(left, right):
    """
    Compare the magnitudes of two ordinary Rationals.  Return -1, 0 or +1, like the old cmp().

    Signs are ignored.
    """
    left_exp, left_cross = vector_multiply(left.num_exp, left.num, right.den_exp, right.den)
    right_exp, right_cross = vector_multiply(right.num_exp, right.num, left.den_exp, left.den)
    if left_exp != right_exp:
        return -1 if left_exp < right_exp else 1
    if left_cross != right_cross:
        # NOTE:  No trailing zeros, so a shorter vector that is a prefix of a longer one is smaller.
        return -1 if left_cross < right_cross else 1
    return 0


def _signed_order(left, right):
    """magnitude_order() turned around for negative operands.  Both must have the same sign."""
    order = magnitude_order(left, right)
    return order if left.is_positive() else -order


def equal(left, right):
    verdict = equal_check(left, right)
    if verdict == Verdict.MUST_COMPARE:
        return magnitude_order(left, right) == 0
    return verdict == Verdict.PASS


def not_equal(left, right):
    return not equal(left, right)


def less(left, right):
    verdict = less_check(left, right)
    if verdict == Verdict.MUST_COMPARE:
        return _signed_order(left, right) < 0
    return verdict == Verdict.PASS


def more(left, right):
    verdict = more_check(left, right)
    if verdict == Verdict.MUST_COMPARE:
        return _signed_order(left, right) > 0
    return verdict == Verdict.PASS


def less_equal(left, right):
    return not more(left, right)


def more_equal(left, right):
    return not less(left, right)
