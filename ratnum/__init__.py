"""
ratnum - exact rational numbers of unbounded size, built on 32-bit limbs.

Usage example:

    from ratnum import Rational

    a = Rational(3)
    b = Rational(5)
    assert a + b == 8
    assert a / b * b == a
    assert a ** -2 == Rational(1) / 9
    assert (a / 0).is_nan()
    assert (Rational(0) / 0).is_undefined()
"""

from .compare import Verdict
from .limb import BufferSizeError
from .rational import Rational
from .rational import State

__all__ = [
    'BufferSizeError',
    'Rational',
    'State',
    'Verdict',
]

from . import version
__version__ = version.__doc__
