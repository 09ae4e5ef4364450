"""Classical Gauss quadrature rules (Golub--Welsch)."""

from .exceptions import (
    QuadratureError,
    InvalidParameterError,
    UnsupportedEndpointError,
    InsufficientPointsError,
    DegenerateShiftError,
)
from .recurrence import (
    EndPt,
    NEITHER,
    LEFT,
    RIGHT,
    BOTH,
    RecurrenceCoefficients,
    legendre_coeff,
    chebyshev_coeff,
    jacobi_coeff,
    laguerre_coeff,
    hermite_coeff,
    recurrence_coefficients,
)
from .tridiag import EigenOptions, solve_shifted, tridiag_eigen
from .rules import (
    QuadratureRule,
    adjust_endpoints,
    custom_gauss_rule,
    legendre,
    chebyshev,
    jacobi,
    laguerre,
    hermite,
    gauss_rule,
    gauss_legendre_rule,
)
from .orthopoly import orthonormal_poly

__all__ = [
    "QuadratureError",
    "InvalidParameterError",
    "UnsupportedEndpointError",
    "InsufficientPointsError",
    "DegenerateShiftError",
    "EndPt",
    "NEITHER",
    "LEFT",
    "RIGHT",
    "BOTH",
    "RecurrenceCoefficients",
    "legendre_coeff",
    "chebyshev_coeff",
    "jacobi_coeff",
    "laguerre_coeff",
    "hermite_coeff",
    "recurrence_coefficients",
    "EigenOptions",
    "solve_shifted",
    "tridiag_eigen",
    "QuadratureRule",
    "adjust_endpoints",
    "custom_gauss_rule",
    "legendre",
    "chebyshev",
    "jacobi",
    "laguerre",
    "hermite",
    "gauss_rule",
    "gauss_legendre_rule",
    "orthonormal_poly",
]
