"""
Generic complex numbers over any scalar type.

    from gencomplex import Complex
    Complex(3, 4) * Complex(1, -2)
"""
from gencomplex.complex import Complex
from gencomplex.scalar import ScalarCapabilityError, ScalarOps, register_scalar, scalar_ops

__all__ = ["Complex", "ScalarCapabilityError", "ScalarOps", "register_scalar", "scalar_ops"]
