"""
Limb buffer primitives - carry-propagating arithmetic over raw lists of limbs.

A limb is one unsigned 32-bit "digit" stored in a Python int, 0 <= limb < RADIX.
A limb buffer is a list of limbs, most significant first.

Every primitive here works like pencil-and-paper arithmetic:
it walks the last n limbs of its buffers from least significant (the right end)
to most significant, carrying or borrowing one step at a time.
Each limb result is computed in a double-width accumulator (a plain Python int)
and split into its low half (stored) and its high half (the carry).

These functions never allocate, normalize, or know about signs.
They do check that every buffer is long enough, and raise BufferSizeError if not.
"""


LIMB_BITS = 32
RADIX = 1 << LIMB_BITS   # 0x100000000
LIMB_MASK = RADIX - 1    # 0xFFFFFFFF


class BufferSizeError(ValueError):
    """A limb buffer is too short for the number of limbs it was asked to process."""


def _check_span(name, buffer, n, end=None):
    """
    Make sure buffer[end-n:end] exists.  Return end.

    end defaults to len(buffer), i.e. the span is the last n limbs.
    """
    if end is None:
        end = len(buffer)
    if n < 0:
        raise BufferSizeError("Negative limb count {n} for {name}".format(n=n, name=name))
    if not 0 <= end <= len(buffer) or end - n < 0:
        raise BufferSizeError("{name} has {length} limbs, cannot process {n} ending at {end}".format(
            name=name,
            length=len(buffer),
            n=n,
            end=end,
        ))
    return end


def add(dst, a, b, n, carry=0):
    """
    dst = a + b, over the last n limbs of each buffer.  Return the carry out, 0 or 1.

    dst may be the same list as a or b.
    """
    d_end = _check_span('dst', dst, n)
    a_end = _check_span('a', a, n)
    b_end = _check_span('b', b, n)
    for i in range(1, n + 1):
        total = a[a_end - i] + b[b_end - i] + carry
        dst[d_end - i] = total & LIMB_MASK
        carry = total >> LIMB_BITS
    return carry


def sub(dst, a, b, n, borrow=0):
    """
    dst = a - b, over the last n limbs of each buffer.  Return the borrow out, 0 or 1.

    A borrow of 1 means b was bigger than a, and dst holds the two's complement wrap-around,
    a - b + RADIX**n.  See negate().
    """
    d_end = _check_span('dst', dst, n)
    a_end = _check_span('a', a, n)
    b_end = _check_span('b', b, n)
    for i in range(1, n + 1):
        difference = a[a_end - i] - b[b_end - i] - borrow
        dst[d_end - i] = difference & LIMB_MASK
        borrow = 1 if difference < 0 else 0
    return borrow


def accumulate(dst, src, n, carry=0, dst_end=None):
    """
    dst += src, in place.  Return the carry out.

    Processes the last n limbs of src, onto the n limbs of dst that end just before dst_end.
    dst_end defaults to len(dst).  A smaller dst_end shifts src toward the more significant end,
    which is how partial products line up in mul_buffers().
    """
    d_end = _check_span('dst', dst, n, dst_end)
    s_end = _check_span('src', src, n)
    for i in range(1, n + 1):
        total = dst[d_end - i] + src[s_end - i] + carry
        dst[d_end - i] = total & LIMB_MASK
        carry = total >> LIMB_BITS
    return carry


def negate(buffer, n, borrow=0):
    """
    Two's complement negation of the last n limbs, in place.  Return the borrow out.

    Turns the wrapped-around result of an underflowing sub() back into a magnitude.
    """
    end = _check_span('buffer', buffer, n)
    for i in range(1, n + 1):
        difference = -buffer[end - i] - borrow
        buffer[end - i] = difference & LIMB_MASK
        borrow = 1 if difference < 0 else 0
    return borrow


def scale_mul_limb(dst, src, n, scalar, carry=0):
    """
    dst = src * scalar, over the last n limbs.  Return the overflow limb.

    The overflow limb is the most significant limb of the product,
    so the whole product is [overflow] + dst[-n:].
    """
    assert 0 <= scalar <= LIMB_MASK, "Scalar {:#x} is not a limb".format(scalar)
    d_end = _check_span('dst', dst, n)
    s_end = _check_span('src', src, n)
    for i in range(1, n + 1):
        product = src[s_end - i] * scalar + carry
        dst[d_end - i] = product & LIMB_MASK
        carry = product >> LIMB_BITS
    return carry


def mul_buffers(dst, bigger, bigger_len, smaller, smaller_len):
    """
    Grade-school multiplication.  dst = bigger * smaller, in the last bigger_len + smaller_len + 1 limbs.

    For each limb of smaller, least significant first, the partial product of bigger by that limb
    goes into a scratch buffer, then gets accumulated into dst one limb further left than the last.
    The window of dst is cleared first.  The extra limb at its left catches any final carry.
    """
    window = bigger_len + smaller_len + 1
    d_end = _check_span('dst', dst, window)
    _check_span('bigger', bigger, bigger_len)
    s_end = _check_span('smaller', smaller, smaller_len)
    for i in range(d_end - window, d_end):
        dst[i] = 0
    scratch = [0] * (bigger_len + 1)
    for shift in range(smaller_len):
        multiplier = smaller[s_end - 1 - shift]
        if multiplier == 0:
            continue
        scratch[0] = scale_mul_limb(scratch, bigger, bigger_len, multiplier)
        partial_end = d_end - shift
        carry = accumulate(dst, scratch, bigger_len + 1, dst_end=partial_end)
        index = partial_end - bigger_len - 2
        while carry:
            if index < d_end - window:
                raise BufferSizeError("Multiplication carry ran off the left end of dst")
            total = dst[index] + carry
            dst[index] = total & LIMB_MASK
            carry = total >> LIMB_BITS
            index -= 1
