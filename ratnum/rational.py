"""
A Rational is an exact fraction, signed, with a numerator and denominator of unbounded size.

Features:
 - arbitrary precision
 - arbitrary range, with huge powers of the radix stored in a single limb
 - Zero, NaN and Undefined as values, never exceptions
"""

import fractions
import logging
import math
import numbers

from . import compare
from . import limb
from .vector import mantissa_shift
from .vector import truncate
from .vector import vector_add
from .vector import vector_from_int
from .vector import vector_multiply
from .vector import vector_power
from .vector import vector_sub


logger = logging.getLogger(__name__)


class State:
    """
    The four states of a Rational.  Each Rational is in exactly one.

    A state is not stored separately, it follows from which of the numerator and denominator
    have any limbs:

        State       numerator   denominator     example
        ---------   ---------   -----------     -------
        UNDEFINED   empty       empty           0/0
        ZERO        empty       limbs           0/1
        NAN         limbs       empty           1/0
        ORDINARY    limbs       limbs           3/1

    So a Rational with an empty denominator can never pass for an ordinary value.

    Also, State.name_from_code[State.NAN] == 'NAN'
    """

    UNDEFINED = 0
    ZERO      = 1
    NAN       = 2
    ORDINARY  = 3

    name_from_code = None   # {0: 'UNDEFINED', 1: 'ZERO', ...}

    @classmethod
    def internal_setup(cls):
        """Initialize State properties after the State class is otherwise defined."""
        cls.name_from_code = { getattr(cls, attr): attr for attr in dir(cls) if attr.isupper() }

    @staticmethod
    def from_limbs(num, den):
        """Which State goes with these numerator and denominator limbs?"""
        if num:
            return State.ORDINARY if den else State.NAN
        else:
            return State.ZERO if den else State.UNDEFINED


State.internal_setup()
assert State.name_from_code[State.UNDEFINED] == 'UNDEFINED'
assert State.from_limbs([1], []) == State.NAN


class Rational(numbers.Number):
    """
    Sign, numerator and denominator.  Each of the latter two is a positional vector.

        value = sign * value(num_exp, num) / value(den_exp, den)

    where value(exponent, limbs) reads the limbs as the radix fraction 0.l0 l1 ... scaled by
    RADIX**exponent.  See the vector module.  So only exp == num_exp - den_exp matters to the value.

        assert Rational(3) == Rational.from_parts(Rational.POSITIVE, 1, [3], 1, [1])
        assert Rational(3) == Rational.from_parts(Rational.POSITIVE, 5, [6], 5, [2])

    Fractions are never reduced.  Equal values may have different limbs, e.g. 6/2 and 3/1,
    so compare values with ==, not with num and den.

    Arithmetic never raises.  Undefined results (0/0) and NaN results (1/0) are Rationals too.
    (The one exception is sqrt(), which has no implementation for ordinary values.)
    """

    __slots__ = ('_sign', '_num_exp', '_num', '_den_exp', '_den', '_state')

    POSITIVE = True
    NEGATIVE = False

    DEFAULT_SIGN = POSITIVE
    DEFAULT_EXPONENT = 0

    def __init__(self, content=None):
        """
        Rational constructor.

        content - the type can be:
            int             42
            another         Rational(42)
            None            Undefined
        """
        self._set_parts(self.DEFAULT_SIGN, self.DEFAULT_EXPONENT, [], self.DEFAULT_EXPONENT, [])
        if isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, Rational):
            self._from_another_rational(content)
        elif content is None:
            '''Undefined, already.'''
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    class ConstructorTypeError(TypeError):
        """e.g. Rational(3.5) or Rational('3')"""

    class ConstructorValueError(ValueError):
        """e.g. Rational.from_parts(Rational.POSITIVE, 1, [2**32], 1, [1])"""

    class SqrtNotImplemented(NotImplementedError):
        """Rational(2).sqrt(10) has no implementation yet."""

    class SpecialValueError(ValueError):
        """e.g. Rational.nan().fraction(), there is no Fraction for NaN."""

    def _set_parts(self, sign, num_exp, num, den_exp, den):
        """Fill in every slot.  The vectors become the property of this Rational, never to be modified."""
        # noinspection PyAttributeOutsideInit
        self._sign = sign
        self._num_exp = num_exp
        self._num = num
        self._den_exp = den_exp
        self._den = den
        self._state = State.from_limbs(num, den)

    def _from_int(self, i):
        """Fill in from an int, of any size."""
        if i == 0:
            self._set_parts(self.DEFAULT_SIGN, self.DEFAULT_EXPONENT, [], self.DEFAULT_EXPONENT, [1])
        else:
            num_exp, num = vector_from_int(abs(i))
            den_exp, den = vector_from_int(1)
            self._set_parts(self.POSITIVE if i > 0 else self.NEGATIVE, num_exp, num, den_exp, den)

    def _from_another_rational(self, other):
        """
        Copy constructor.  Vectors are shared, they are never modified.

            assert Rational(1) == Rational(Rational(1))
        """
        self._set_parts(other._sign, other._num_exp, other._num, other._den_exp, other._den)

    @classmethod
    def from_parts(cls, sign, num_exp, num, den_exp, den):
        """
        Construct a Rational from its sign, numerator and denominator.

        sign - Rational.POSITIVE or Rational.NEGATIVE
        num_exp, den_exp - exponents, ints
        num, den - limbs, most significant first, each 0 <= limb < 2**32

        Both sides are normalized, so leading and trailing zero limbs are harmless.
        Empty limbs make special values, e.g. from_parts(POSITIVE, 0, [], 0, [1]) is Zero.

            assert Rational(3) == Rational.from_parts(Rational.POSITIVE, 1, [3], 1, [1])
        """
        for name, exponent in (('numerator', num_exp), ('denominator', den_exp)):
            if not isinstance(exponent, int):
                raise cls.ConstructorValueError("The {name} exponent must be an int, not {type}".format(
                    name=name,
                    type=type(exponent).__name__,
                ))
        num = list(num)
        den = list(den)
        for name, limbs in (('numerator', num), ('denominator', den)):
            for each_limb in limbs:
                if not isinstance(each_limb, int) or not 0 <= each_limb <= limb.LIMB_MASK:
                    raise cls.ConstructorValueError("The {name} has a limb {limb!r} out of range".format(
                        name=name,
                        limb=each_limb,
                    ))
        num_exp = truncate(num_exp, num)
        den_exp = truncate(den_exp, den)
        return cls._from_vectors(bool(sign), num_exp, num, den_exp, den)

    @classmethod
    def _from_vectors(cls, sign, num_exp, num, den_exp, den):
        """Construct from vectors already normalized.  They become the property of the new Rational."""
        return_value = cls()
        return_value._set_parts(sign, num_exp, num, den_exp, den)
        return return_value

    # Special values
    # --------------
    @classmethod
    def zero(cls):
        return cls._from_vectors(cls.DEFAULT_SIGN, cls.DEFAULT_EXPONENT, [], cls.DEFAULT_EXPONENT, [1])

    @classmethod
    def nan(cls):
        return cls._from_vectors(cls.DEFAULT_SIGN, cls.DEFAULT_EXPONENT, [1], cls.DEFAULT_EXPONENT, [])

    @classmethod
    def undefined(cls):
        return cls()

    @classmethod
    def one(cls):
        return cls._from_vectors(cls.DEFAULT_SIGN, cls.DEFAULT_EXPONENT, [1], cls.DEFAULT_EXPONENT, [1])

    # Accessors
    # ---------
    @property
    def sign(self):
        """Rational.POSITIVE or Rational.NEGATIVE"""
        return self._sign

    @property
    def exp(self):
        """The combined exponent, numerator exponent minus denominator exponent."""
        return self._num_exp - self._den_exp

    @property
    def num(self):
        """Numerator limbs, most significant first."""
        return tuple(self._num)

    @property
    def den(self):
        """Denominator limbs, most significant first."""
        return tuple(self._den)

    @property
    def num_exp(self):
        return self._num_exp

    @property
    def den_exp(self):
        return self._den_exp

    @property
    def state(self):
        """State.UNDEFINED, State.ZERO, State.NAN or State.ORDINARY"""
        return self._state

    def is_zero(self):
        return self._state == State.ZERO

    def is_nan(self):
        return self._state == State.NAN

    def is_undefined(self):
        return self._state == State.UNDEFINED

    def is_ordinary(self):
        """Neither Zero nor NaN nor Undefined."""
        return self._state == State.ORDINARY

    def is_negative(self):
        """Is this an ordinary value less than zero?  (Special values are neither positive nor negative.)"""
        return self.is_ordinary() and self._sign == self.NEGATIVE

    def is_positive(self):
        """Is this an ordinary value greater than zero?"""
        return self.is_ordinary() and self._sign == self.POSITIVE

    def __bool__(self):
        """Anything but Zero is true.  Even NaN and Undefined."""
        return not self.is_zero()

    # Debug output
    # ------------
    def __repr__(self):
        """
        Handle repr(Rational(x))

            assert 'Rational.from_parts(Rational.POSITIVE, 1, [0x3], 1, [0x1])' == repr(Rational(3))
        """
        return "{cls}.from_parts({cls}.{sign}, {num_exp}, [{num}], {den_exp}, [{den}])".format(
            cls=type(self).__name__,
            sign='POSITIVE' if self._sign == self.POSITIVE else 'NEGATIVE',
            num_exp=self._num_exp,
            num=', '.join('{:#x}'.format(x) for x in self._num),
            den_exp=self._den_exp,
            den=', '.join('{:#x}'.format(x) for x in self._den),
        )

    def dump(self):
        """
        Multi-line rendering of the guts, limbs in hexadecimal.

            {
              state: ORDINARY
              sign : +
              exp  : 0
              num  : 1 [ 3 ]
              den  : 1 [ 1 ]
            }
        """
        return (
            "{{\n"
            "  state: {state}\n"
            "  sign : {sign}\n"
            "  exp  : {exp}\n"
            "  num  : {num_exp} [ {num}]\n"
            "  den  : {den_exp} [ {den}]\n"
            "}}"
        ).format(
            state=State.name_from_code[self._state],
            sign='+' if self._sign == self.POSITIVE else '-',
            exp=self.exp,
            num_exp=self._num_exp,
            num=''.join('{:x} '.format(x) for x in self._num),
            den_exp=self._den_exp,
            den=''.join('{:x} '.format(x) for x in self._den),
        )

    def log_dump(self, to_logger=None, level=logging.DEBUG):
        """Send dump() to a logger, this module's logger by default."""
        (to_logger or logger).log(level, "%s", self.dump())

    # Conversion
    # ----------
    def fraction(self):
        """
        The exact value as a fractions.Fraction, reduced to lowest terms.

        Raises SpecialValueError for NaN and Undefined.
        Careful, a huge exponent makes a huge int.
        """
        return self._fraction_state_dict[self._state](self)

    _fraction_state_dict = {
        State.UNDEFINED: lambda self: self._fraction_cant_be("Undefined"),
        State.ZERO:      lambda self: fractions.Fraction(0),
        State.NAN:       lambda self: self._fraction_cant_be("NaN"),
        State.ORDINARY:  lambda self: self._to_fraction(),
    }

    @classmethod
    def _fraction_cant_be(cls, name):
        raise cls.SpecialValueError("{} cannot be represented by a Fraction.".format(name))

    def _to_fraction(self):
        """To a Fraction, for an ordinary value."""
        (num_mantissa, num_shift) = mantissa_shift(self._num_exp, self._num)
        (den_mantissa, den_shift) = mantissa_shift(self._den_exp, self._den)
        shift_bits = (num_shift - den_shift) * limb.LIMB_BITS
        if shift_bits >= 0:
            the_fraction = fractions.Fraction(num_mantissa << shift_bits, den_mantissa)
        else:
            the_fraction = fractions.Fraction(num_mantissa, den_mantissa << -shift_bits)
        return the_fraction if self._sign == self.POSITIVE else -the_fraction

    def __int__(self):
        """To an int, truncating toward zero."""
        return math.trunc(self.fraction())

    def __float__(self):
        """To a floating point number.  NaN and Undefined both become nan."""
        return self._float_state_dict[self._state](self)

    _float_state_dict = {
        State.UNDEFINED: lambda self: float('nan'),
        State.ZERO:      lambda self: 0.0,
        State.NAN:       lambda self: float('nan'),
        State.ORDINARY:  lambda self: float(self._to_fraction()),
    }

    # Comparison
    # ----------
    # SEE:  compare.py for NaN, Undefined and the rest of the special cases.
    def __eq__(self, other):  return self._relation(compare.equal, other)
    def __ne__(self, other):  return self._relation(compare.not_equal, other)
    def __lt__(self, other):  return self._relation(compare.less, other)
    def __le__(self, other):  return self._relation(compare.less_equal, other)
    def __gt__(self, other):  return self._relation(compare.more, other)
    def __ge__(self, other):  return self._relation(compare.more_equal, other)

    def _relation(self, relation, other):
        """Compare with anything that can be a Rational.  Otherwise NotImplemented."""
        try:
            other = self._operand(other)
        except self.ConstructorTypeError:
            return NotImplemented
        return relation(self, other)

    # NOTE:  Equal values need not have equal limbs, and negate() mutates, so no __hash__().
    __hash__ = None

    @classmethod
    def _operand(cls, x):
        """
        Get x ready to be an operand.  ConstructorTypeError if it can't be.

        Only a Rational or an int will do.  In particular None is not Undefined here,
        so Rational(1) == None is False and Rational(1) + None raises TypeError.
        """
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            raise cls.ConstructorTypeError("A {} is not an operand for {}".format(
                type(x).__name__,
                cls.__name__,
            ))

    # Math
    # ----
    def negate(self):
        """Flip the sign, in place.  Return self."""
        self._sign = not self._sign
        return self

    def __neg__(self): return type(self)(self).negate()
    def __pos__(self): return type(self)(self)

    def __abs__(self):
        return_value = type(self)(self)
        return_value._sign = self.POSITIVE
        return return_value

    def __add__(self, other): return self._binary_op(self.add, self, other)
    def __radd__(self, other): return self._binary_op(self.add, other, self)
    def __sub__(self, other): return self._binary_op(self.sub, self, other)
    def __rsub__(self, other): return self._binary_op(self.sub, other, self)
    def __mul__(self, other): return self._binary_op(self.mul, self, other)
    def __rmul__(self, other): return self._binary_op(self.mul, other, self)
    def __truediv__(self, other): return self._binary_op(self.div, self, other)
    def __rtruediv__(self, other): return self._binary_op(self.div, other, self)

    def __pow__(self, other):
        """Rational(x) ** n, for an int n only."""
        if not isinstance(other, int):
            return NotImplemented
        return self.power(other)

    @classmethod
    def _binary_op(cls, op, input_left, input_right):
        """Two-input operator, after making Rationals of both inputs."""
        try:
            left = cls._operand(input_left)
            right = cls._operand(input_right)
        except cls.ConstructorTypeError:
            return NotImplemented
        return op(left, right)

    @classmethod
    def add(cls, left, right):
        """left + right"""
        if left.is_undefined() or right.is_undefined():
            return cls.undefined()
        if left.is_zero():
            return cls(right)
        if right.is_zero():
            return cls(left)
        if left.is_nan() or right.is_nan():
            return cls.nan()
        return cls._cross_sum(left, right, right.sign)

    @classmethod
    def sub(cls, left, right):
        """left - right"""
        if left.is_undefined() or right.is_undefined():
            return cls.undefined()
        if left.is_zero():
            return -right
        if right.is_zero():
            return cls(left)
        if left.is_nan() or right.is_nan():
            return cls.nan()
        return cls._cross_sum(left, right, not right.sign)

    @classmethod
    def _cross_sum(cls, left, right, right_sign):
        """
        a/b + c/d == (a*d + c*b) / (b*d), for ordinary values.

        right_sign stands in for the sign of right, flipped to subtract.
        When the signs differ the magnitudes subtract, and the sign of left wins unless the
        subtraction flipped.
        """
        ad_exp, ad = vector_multiply(left._num_exp, left._num, right._den_exp, right._den)
        cb_exp, cb = vector_multiply(right._num_exp, right._num, left._den_exp, left._den)
        den_exp, den = vector_multiply(left._den_exp, left._den, right._den_exp, right._den)
        if left._sign == right_sign:
            num_exp, num = vector_add(ad_exp, ad, cb_exp, cb)
            sign = left._sign
        else:
            num_exp, num, flipped = vector_sub(ad_exp, ad, cb_exp, cb)
            sign = (not left._sign) if flipped else left._sign
        if not num:
            return cls.zero()
        return cls._from_vectors(sign, num_exp, num, den_exp, den)

    @classmethod
    def mul(cls, left, right):
        """left * right"""
        if left.is_undefined() or right.is_undefined():
            return cls.undefined()
        if left.is_nan() and right.is_zero() or left.is_zero() and right.is_nan():
            return cls.undefined()
        if left.is_zero() or right.is_zero():
            return cls.zero()
        if left.is_nan() or right.is_nan():
            return cls.nan()
        num_exp, num = vector_multiply(left._num_exp, left._num, right._num_exp, right._num)
        den_exp, den = vector_multiply(left._den_exp, left._den, right._den_exp, right._den)
        return cls._from_vectors(left._sign == right._sign, num_exp, num, den_exp, den)

    @classmethod
    def div(cls, left, right):
        """left / right"""
        if left.is_undefined() or right.is_undefined():
            return cls.undefined()
        if left.is_nan() and right.is_nan() or left.is_zero() and right.is_zero():
            return cls.undefined()
        if left.is_zero() or right.is_nan():
            return cls.zero()
        if left.is_nan() or right.is_zero():
            return cls.nan()
        num_exp, num = vector_multiply(left._num_exp, left._num, right._den_exp, right._den)
        den_exp, den = vector_multiply(left._den_exp, left._den, right._num_exp, right._num)
        return cls._from_vectors(left._sign == right._sign, num_exp, num, den_exp, den)

    def power(self, exponent):
        """
        Raise to an int power.  A negative power is the reciprocal of the positive power.

        Special values are their own powers, even to the zero power.
        """
        if not isinstance(exponent, int):
            raise TypeError("Power must be an int, not {}".format(type(exponent).__name__))
        if not self.is_ordinary():
            return type(self)(self)
        if exponent == 0:
            return self.one()
        if exponent > 0:
            (top_exp, top), (bottom_exp, bottom) = (self._num_exp, self._num), (self._den_exp, self._den)
        else:
            (top_exp, top), (bottom_exp, bottom) = (self._den_exp, self._den), (self._num_exp, self._num)
        magnitude = abs(exponent)
        num_exp, num = vector_power(top_exp, top, magnitude)
        den_exp, den = vector_power(bottom_exp, bottom, magnitude)
        sign = self.POSITIVE if magnitude % 2 == 0 else self._sign
        return self._from_vectors(sign, num_exp, num, den_exp, den)

    def sqrt(self, digits):
        """
        Square root, to so many digits.  Special values are their own square roots.

        Not implemented for ordinary values.
        """
        if not self.is_ordinary():
            return type(self)(self)
        raise self.SqrtNotImplemented("Square root of {!r} to {} digits".format(self, digits))

    # Constants named for convenience
    # ---------
    # NOTE:  Rational.ZERO.negate() would change the constant.  Use -Rational.ZERO instead.
    ZERO = None
    ONE = None
    NAN = None
    UNDEFINED = None

    @classmethod
    def internal_setup(cls):
        """Initialize Rational constants after the Rational class is defined."""
        cls.ZERO = cls.zero()
        cls.ONE = cls.one()
        cls.NAN = cls.nan()
        cls.UNDEFINED = cls.undefined()


Rational.internal_setup()
assert Rational.ZERO.is_zero()
assert Rational.UNDEFINED.is_undefined()
