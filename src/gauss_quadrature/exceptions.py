"""Errors raised while building quadrature rules."""

__all__ = [
    "QuadratureError",
    "InvalidParameterError",
    "UnsupportedEndpointError",
    "InsufficientPointsError",
    "DegenerateShiftError",
]


class QuadratureError(ValueError):
    """Base class for all rule construction failures."""


class InvalidParameterError(QuadratureError):
    """A family parameter, point count or coefficient set is out of range."""


class UnsupportedEndpointError(InvalidParameterError):
    """The requested fixed end point does not exist for the weight's interval."""


class InsufficientPointsError(QuadratureError):
    """Too few points for the requested end point configuration."""


class DegenerateShiftError(QuadratureError):
    """Zero pivot in the shifted tridiagonal elimination.

    The shift coincides with an eigenvalue of a leading submatrix of the
    Jacobi matrix, so the end point correction is undefined.
    """
