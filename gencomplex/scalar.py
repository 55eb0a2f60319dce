"""
Scalar capabilities used by ``Complex``.

A complex value never checks its components up front. Each operation asks
for exactly what it needs from the scalar type ``T``:

    zero(T), one(T), is_zero(x)    identities
    power(x, e), sqrt(x)           magnitude only
    + - * / and unary -            taken straight from T's operators

Builtin ``int``, ``float``, ``Fraction`` and the numpy scalar types are
registered below. Anything else is resolved by duck typing
(``T.zero()`` or ``T(0)``, ``x.sqrt()``, ...) or registered explicitly with
``register_scalar``.
"""
from __future__ import annotations

import inspect
import logging
import math
import numbers
from dataclasses import dataclass
from fractions import Fraction
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Protocol

import numpy as np

_logger = logging.getLogger(__name__)


class ScalarCapabilityError(TypeError):
    """The scalar type does not provide a capability an operation needs."""


# ---------- operator contracts ----------
class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any: ...


class SupportsSub(Protocol):
    def __sub__(self, other: Any) -> Any: ...


class SupportsMul(Protocol):
    def __mul__(self, other: Any) -> Any: ...


class SupportsTrueDiv(Protocol):
    def __truediv__(self, other: Any) -> Any: ...


class SupportsNeg(Protocol):
    def __neg__(self) -> Any: ...


class SupportsPow(Protocol):
    def __pow__(self, other: Any) -> Any: ...


class Scalar(SupportsAdd, SupportsSub, SupportsMul, SupportsTrueDiv,
             SupportsNeg, SupportsPow, Protocol):
    """Everything ``Complex`` can ask of its components."""


@dataclass(frozen=True)
class ScalarOps:
    """Resolved capabilities of one scalar type."""
    zero: Callable[[], Any]
    one: Callable[[], Any]
    is_zero: Callable[[Any], bool]
    sqrt: Callable[[Any], Any]


# type -> {capability name: callable}
_REGISTRY: Dict[type, Dict[str, Callable]] = {}


def register_scalar(scalar_type: type, *,
                    zero: Optional[Callable[[], Any]] = None,
                    one: Optional[Callable[[], Any]] = None,
                    sqrt: Optional[Callable[[Any], Any]] = None,
                    is_zero: Optional[Callable[[Any], bool]] = None) -> None:
    """
    Register (or override) capabilities for ``scalar_type``.

    The entry also applies to subclasses. Capabilities left as ``None`` are
    resolved by duck typing when first needed.
    """
    entry = {name: fn for name, fn in
             (("zero", zero), ("one", one), ("sqrt", sqrt), ("is_zero", is_zero))
             if fn is not None}
    _REGISTRY[scalar_type] = entry
    scalar_ops.cache_clear()
    _logger.debug("registered scalar %s with %s", scalar_type.__name__, sorted(entry))


def _registered(scalar_type: type) -> Dict[str, Callable]:
    for klass in scalar_type.__mro__:
        if klass in _REGISTRY:
            return _REGISTRY[klass]
    return {}


def _is_static_maker(scalar_type: type, name: str) -> bool:
    maker = inspect.getattr_static(scalar_type, name, None)
    return isinstance(maker, (staticmethod, classmethod))


def _identity(scalar_type: type, name: str, literal: int) -> Callable[[], Any]:
    # static or class T.zero() / T.one() first, then T(0) / T(1)
    if _is_static_maker(scalar_type, name):
        return getattr(scalar_type, name)

    def build():
        try:
            return scalar_type(literal)
        except Exception as exc:
            raise ScalarCapabilityError(
                f"{scalar_type.__name__} has no {name}(); "
                f"register one with register_scalar()") from exc
    return build


def _duck_sqrt(x):
    method = getattr(x, "sqrt", None)
    if not callable(method):
        raise ScalarCapabilityError(
            f"{type(x).__name__} has no sqrt(); register one with register_scalar()")
    return method()


@lru_cache(maxsize=256)
def scalar_ops(scalar_type: type) -> ScalarOps:
    """Resolve the capabilities of ``scalar_type``."""
    entry = _registered(scalar_type)
    zero_fn = entry.get("zero") or _identity(scalar_type, "zero", 0)
    one_fn = entry.get("one") or _identity(scalar_type, "one", 1)
    sqrt_fn = entry.get("sqrt") or _duck_sqrt
    is_zero_fn = entry.get("is_zero")
    if is_zero_fn is None:
        if callable(getattr(scalar_type, "is_zero", None)):
            is_zero_fn = lambda x: bool(x.is_zero())
        else:
            is_zero_fn = lambda x: bool(x == zero_fn())
    if not entry:
        _logger.debug("resolved scalar %s by duck typing", scalar_type.__name__)
    return ScalarOps(zero=zero_fn, one=one_fn, is_zero=is_zero_fn, sqrt=sqrt_fn)


# ---------- convenience ----------
def is_scalar(value) -> bool:
    """Whether a bare operand can be promoted to ``value + 0i``."""
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Number) or _registered(type(value)):
        return True
    return _is_static_maker(type(value), "zero")


def zero(scalar_type: type):
    return scalar_ops(scalar_type).zero()


def one(scalar_type: type):
    return scalar_ops(scalar_type).one()


def is_zero(x) -> bool:
    return scalar_ops(type(x)).is_zero(x)


def sqrt(x):
    return scalar_ops(type(x)).sqrt(x)


def power(x, e):
    """``x ** e`` with T's own power operator."""
    return x ** e


# ---------- builtin scalars ----------
def _fraction_sqrt(x: Fraction) -> Fraction:
    if x < 0:
        raise ValueError("math domain error")
    num, den = math.isqrt(x.numerator), math.isqrt(x.denominator)
    if num * num == x.numerator and den * den == x.denominator:
        return Fraction(num, den)
    return Fraction(math.sqrt(x))


def _np_integer_sqrt(x):
    return type(x)(math.isqrt(int(x)))


register_scalar(int, sqrt=math.isqrt)
register_scalar(float, sqrt=math.sqrt)
register_scalar(Fraction, sqrt=_fraction_sqrt)
register_scalar(np.integer, sqrt=_np_integer_sqrt)
register_scalar(np.floating, sqrt=np.sqrt)
