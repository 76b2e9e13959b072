"""
Positional vectors - a list of limbs plus an exponent.

The limbs are most significant first.  The exponent says where they sit:

    value(exponent, [l0, l1, ... ln-1]) == l0 * RADIX**(exponent-1) + l1 * RADIX**(exponent-2) + ...

That is, read the limbs as a radix fraction 0.l0 l1 ... ln-1 and scale it by RADIX**exponent.
So (1, [3]) is 3, (2, [1]) is RADIX, (0, [1]) is 1/RADIX.

A normalized vector has no leading or trailing zero limbs.  Runs of zeros are folded into
the exponent instead of being stored, so RADIX**1000000 is (1000001, [1]), one limb.
The empty vector, exponent 0, is zero.

The operations here take (exponent, limbs) pairs and return new pairs, always normalized.
Operands are never modified, except by the explicitly in-place helpers:
truncate(), push_front(), push_back(), align().
"""

import logging

from . import limb


logger = logging.getLogger(__name__)


def truncate(exponent, vector):
    """
    Normalize a vector in place, stripping leading and trailing zero limbs.  Return the new exponent.

    Each stripped leading zero lowers the exponent by one.
    Stripped trailing zeros leave it alone.
    All zeros (or no limbs at all) become the canonical zero:  an empty vector at exponent 0.
    """
    first = 0
    while first < len(vector) and vector[first] == 0:
        first += 1
    if first == len(vector):
        del vector[:]
        return 0
    last = len(vector) - 1
    while vector[last] == 0:
        last -= 1
    del vector[last + 1:]
    del vector[:first]
    return exponent - first


def push_front(exponent, vector, count, value=0):
    """Prepend count copies of value, in place.  Return the exponent that keeps the old limbs in place."""
    vector[0:0] = [value] * count
    return exponent + count


def push_back(exponent, vector, count, value=0):
    """Append count copies of value, in place.  Return the (unchanged) exponent."""
    vector.extend([value] * count)
    return exponent


def minimum_exponent(exponent, vector):
    """The exponent just past the least significant limb."""
    return exponent - len(vector)


def align(left_exponent, left, right_exponent, right):
    """
    Pad two nonempty vectors, in place, so they cover the same span of positions.  Return the shared exponent.

    The "upper" operand has the larger exponent, the "lower" one the smaller minimum exponent.
    The other one gets zero limbs in front up to the upper exponent,
    and zero limbs in back down to the lower minimum exponent.
    Afterward len(left) == len(right) and limb i of each has the same weight.
    """
    assert left and right, "Cannot align an empty vector"
    upper = max(left_exponent, right_exponent)
    lower = min(minimum_exponent(left_exponent, left), minimum_exponent(right_exponent, right))
    for exponent, vector in ((left_exponent, left), (right_exponent, right)):
        push_back(exponent, vector, minimum_exponent(exponent, vector) - lower)
        push_front(exponent, vector, upper - exponent)
    assert len(left) == len(right) == upper - lower
    return upper


def vector_add(left_exponent, left, right_exponent, right):
    """Sum of two vectors.  Return (exponent, limbs)."""
    if not left:
        return right_exponent, list(right)
    if not right:
        return left_exponent, list(left)
    left = list(left)
    right = list(right)
    exponent = align(left_exponent, left, right_exponent, right)
    result = [0] * len(left)
    carry = limb.add(result, left, right, len(result))
    if carry:
        exponent = push_front(exponent, result, 1, carry)
    exponent = truncate(exponent, result)
    return exponent, result


def vector_sub(left_exponent, left, right_exponent, right):
    """
    Difference of two vectors, as a magnitude.  Return (exponent, limbs, flipped).

    flipped is True when right was bigger than left, so the limbs hold right - left.
    """
    if not right:
        return left_exponent, list(left), False
    if not left:
        return right_exponent, list(right), True
    left = list(left)
    right = list(right)
    exponent = align(left_exponent, left, right_exponent, right)
    result = [0] * len(left)
    borrow = limb.sub(result, left, right, len(result))
    flipped = bool(borrow)
    if flipped:
        limb.negate(result, len(result))
        logger.debug("Subtraction underflowed, %d limbs negated", len(result))
    exponent = truncate(exponent, result)
    return exponent, result, flipped


def vector_multiply(left_exponent, left, right_exponent, right, out=None):
    """
    Product of two vectors.  Return (exponent, limbs).

    out - optional list to hold the product, its old contents discarded.
          Lets a caller reuse buffers.  It must not be left or right.
    """
    if out is None:
        out = []
    assert out is not left and out is not right, "Product buffer must not be an operand"
    if not left or not right:
        del out[:]
        return 0, out
    out[:] = [0] * (len(left) + len(right) + 1)
    if len(left) >= len(right):
        bigger, smaller = left, right
    else:
        bigger, smaller = right, left
    limb.mul_buffers(out, bigger, len(bigger), smaller, len(smaller))
    exponent = truncate(left_exponent + right_exponent + 1, out)
    return exponent, out


def vector_square(exponent, vector, out=None):
    """Square of a vector.  Return (exponent, limbs).  See vector_multiply() for out."""
    if out is None:
        out = []
    assert out is not vector, "Square buffer must not be the operand"
    if not vector:
        del out[:]
        return 0, out
    out[:] = [0] * (2 * len(vector) + 1)
    limb.mul_buffers(out, vector, len(vector), vector, len(vector))
    exponent = truncate(2 * exponent + 1, out)
    return exponent, out


def vector_power(exponent, vector, power):
    """
    Raise a vector to a nonnegative integer power, by squaring.  Return (exponent, limbs).

    Two pairs of buffers take turns.  In one pair the base is squared over and over,
    in the other the result accumulates a factor for each 1 bit of the power.
    Each step writes into the idle buffer of its pair and then the pair's index flips,
    so no buffer is reallocated or copied.
    """
    if power < 0:
        raise ValueError("Vector power must be nonnegative, not {}".format(power))
    squares = [list(vector), []]
    square_exponents = [exponent, 0]
    products = [[1], []]
    product_exponents = [1, 0]
    s = p = 0
    logger.debug("Vector power %d of a %d-limb vector", power, len(vector))
    while power:
        if power & 1:
            product_exponents[1 - p], _ = vector_multiply(
                product_exponents[p], products[p],
                square_exponents[s], squares[s],
                out=products[1 - p],
            )
            p = 1 - p
        power >>= 1
        if power:
            square_exponents[1 - s], _ = vector_square(square_exponents[s], squares[s], out=squares[1 - s])
            s = 1 - s
    return product_exponents[p], products[p]


def vector_from_int(value):
    """Convert a nonnegative int to a normalized (exponent, limbs) pair."""
    if value < 0:
        raise ValueError("Vectors are magnitudes, {} is negative".format(value))
    limbs = []
    while value:
        limbs.append(value & limb.LIMB_MASK)
        value >>= limb.LIMB_BITS
    limbs.reverse()
    exponent = truncate(len(limbs), limbs)
    return exponent, limbs
assert (1, [3]) == vector_from_int(3)
assert (2, [1]) == vector_from_int(limb.RADIX)
assert (0, []) == vector_from_int(0)


def mantissa_shift(exponent, vector):
    """
    The vector as an integer and a limb shift:  value == mantissa * RADIX**shift.

    The shift may be negative.
    """
    mantissa = 0
    for each_limb in vector:
        mantissa = (mantissa << limb.LIMB_BITS) | each_limb
    return mantissa, minimum_exponent(exponent, vector)
assert (0x0000000100000002, -1) == mantissa_shift(1, [1, 2])
