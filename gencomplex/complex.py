from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from gencomplex import scalar

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
# Negative imaginary parts render literally, e.g. "3+-2i".
DISPLAY_TEMPLATE = "{re}+{im}i"

T = TypeVar("T")


@dataclass(frozen=True)
class Complex(Generic[T]):
    """
    A complex number over any scalar type ``T``.

    Every operation defers to ``T``: its operators for the arithmetic and the
    capabilities in ``gencomplex.scalar`` for identities and square roots.
    Nothing is checked at construction; a missing capability only surfaces
    when an operation that needs it runs.

    Numeric failures are ``T``'s own. Dividing by a complex zero raises
    ``ZeroDivisionError`` for ``int``/``float`` parts and yields inf/nan for
    numpy floats.

    Examples
    --------
    Complex(3, 4) + Complex(6, -10)   -> Complex(re=9, im=-6)
    abs(Complex(0, 6))                -> 6
    Complex.zero(float)               -> Complex(re=0.0, im=0.0)
    """
    re: T
    im: T

    # numpy arrays defer to our operators instead of broadcasting over us
    __array_ufunc__ = None

    # ---------- identities ----------
    @classmethod
    def zero(cls, scalar_type: type = int) -> "Complex":
        z = scalar.zero(scalar_type)
        return cls(z, z)

    @classmethod
    def one(cls, scalar_type: type = int) -> "Complex":
        return cls(scalar.one(scalar_type), scalar.zero(scalar_type))

    def is_zero(self) -> bool:
        return scalar.is_zero(self.re) and scalar.is_zero(self.im)

    # ---------- unary ----------
    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def negate(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def magnitude(self):
        """sqrt(re² + im²) with T's own power and square root."""
        unit = scalar.one(type(self.re))
        two = unit + unit
        squares = scalar.power(self.re, two) + scalar.power(self.im, two)
        return scalar.sqrt(squares)

    # ---------- arithmetic ----------
    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(self.re * other.re - self.im * other.im,
                       self.im * other.re + self.re * other.im)

    def divide(self, other: "Complex") -> "Complex":
        # multiply by the conjugate, divide by |other|²; no zero guard
        denominator = other.re * other.re + other.im * other.im
        real_numerator = self.re * other.re + self.im * other.im
        imag_numerator = self.im * other.re - self.re * other.im
        return Complex(real_numerator / denominator,
                       imag_numerator / denominator)

    # ---------- dunder sugar ----------
    @staticmethod
    def _promote(value):
        """Wrap a bare scalar as ``value + 0i``; None for non-numbers."""
        if isinstance(value, Complex):
            return value
        if not scalar.is_scalar(value):
            return None
        try:
            return Complex(value, scalar.zero(type(value)))
        except scalar.ScalarCapabilityError:
            return None

    def _binary(self, other, op, reflected=False):
        other = self._promote(other)
        if other is None:
            return NotImplemented
        return op(other, self) if reflected else op(self, other)

    def __add__(self, other):
        return self._binary(other, Complex.add)

    def __radd__(self, other):
        return self._binary(other, Complex.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, Complex.subtract)

    def __rsub__(self, other):
        return self._binary(other, Complex.subtract, reflected=True)

    def __mul__(self, other):
        return self._binary(other, Complex.multiply)

    def __rmul__(self, other):
        return self._binary(other, Complex.multiply, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, Complex.divide)

    def __rtruediv__(self, other):
        return self._binary(other, Complex.divide, reflected=True)

    # compound assignment rebinds the name; instances are never mutated
    __iadd__ = __add__
    __isub__ = __sub__
    __imul__ = __mul__
    __itruediv__ = __truediv__

    __neg__ = negate
    __abs__ = magnitude

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return DISPLAY_TEMPLATE.format(re=self.re, im=self.im)


if __name__ == "__main__":
    z1 = Complex(3, 4)
    z2 = Complex(6, -10)
    print(z1 + z2)              # 9+-6i
    print(z1 * z2)              # 58+-6i
    print(abs(z1))              # 5
    print(Complex(20, -4) / Complex(3, 2))
