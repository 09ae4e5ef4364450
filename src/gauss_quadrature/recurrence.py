"""Three-term recurrence coefficients of the classical orthonormal families.

Every provider returns the diagonal ``a``, the off-diagonal ``b`` and the
zeroth moment ``muzero`` of the weight function, such that the orthonormal
polynomials satisfy

    b[j] p_j(x) = (x - a[j]) p_{j-1}(x) - b[j-1] p_{j-2}(x)

(1-based indices as in Golub & Welsch).  The weights are

=========================  ============  ===========================
family                     interval      w(x)
=========================  ============  ===========================
Legendre                   (-1, 1)       1
Chebyshev, first kind      (-1, 1)       1 / sqrt(1 - x^2)
Chebyshev, second kind     (-1, 1)       sqrt(1 - x^2)
Jacobi                     (-1, 1)       (1 - x)^alpha (1 + x)^beta
Laguerre                   (0, inf)      x^alpha exp(-x)
Hermite                    (-inf, inf)   exp(-x^2)
=========================  ============  ===========================
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, NamedTuple, Tuple
import numbers

import numpy as np
from scipy.special import gamma, gammaln

from .exceptions import InvalidParameterError, UnsupportedEndpointError

__all__ = [
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
    "COEFFICIENTS",
    "INTERVALS",
    "recurrence_coefficients",
]


class EndPt(Enum):
    """Which end points of the interval are forced into the node set."""

    NEITHER = "neither"  # Gauss
    LEFT = "left"  # left Radau
    RIGHT = "right"  # right Radau
    BOTH = "both"  # Lobatto


NEITHER = EndPt.NEITHER
LEFT = EndPt.LEFT
RIGHT = EndPt.RIGHT
BOTH = EndPt.BOTH


class RecurrenceCoefficients(NamedTuple):
    """Jacobi matrix data: diagonal ``a``, off-diagonal ``b`` and ``muzero``."""

    a: np.ndarray
    b: np.ndarray
    muzero: float


def as_endpt(endpt) -> EndPt:
    """Accept an :class:`EndPt` member or its string value."""
    if isinstance(endpt, EndPt):
        return endpt
    try:
        return EndPt(endpt)
    except ValueError:
        raise InvalidParameterError(f"Unknown end point: {endpt!r}") from None


def check_points(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameterError(f"n must be an integer, got {n!r}")
    if n < 1:
        raise InvalidParameterError("n must be positive")
    return int(n)


def _check_exponent(name: str, value: float) -> float:
    value = float(value)
    if not value > -1.0:
        raise InvalidParameterError(f"{name} must be > -1, got {value}")
    return value


def legendre_coeff(n: int, endpt: EndPt | str = NEITHER) -> RecurrenceCoefficients:
    """Legendre weight ``w(x) = 1`` on ``(-1, 1)``."""
    n = check_points(n)
    as_endpt(endpt)
    i = np.arange(1, n + 1, dtype=float)
    a = np.zeros(n)
    b = i / np.sqrt(4.0 * i * i - 1.0)
    return RecurrenceCoefficients(a, b, 2.0)


def chebyshev_coeff(
    n: int, kind: int = 1, endpt: EndPt | str = NEITHER
) -> RecurrenceCoefficients:
    """Chebyshev weight of the first (``kind=1``) or second kind on ``(-1, 1)``."""
    n = check_points(n)
    as_endpt(endpt)
    if kind not in (1, 2):
        raise InvalidParameterError(f"Unsupported value for kind: {kind!r}")
    a = np.zeros(n)
    b = np.full(n, 0.5)
    if kind == 1:
        b[0] = np.sqrt(0.5)
        muzero = np.pi
    else:
        muzero = 0.5 * np.pi
    return RecurrenceCoefficients(a, b, muzero)


def jacobi_coeff(
    n: int, alpha: float, beta: float, endpt: EndPt | str = NEITHER
) -> RecurrenceCoefficients:
    """Jacobi weight ``(1 - x)^alpha (1 + x)^beta`` on ``(-1, 1)``.

    Parameters
    ----------
    n : int
        Number of coefficients.
    alpha, beta : float
        Exponents, both ``> -1`` so that the weight is integrable.
    endpt : EndPt or str, optional
        End point configuration the coefficients will be used with.

    Returns
    -------
    RecurrenceCoefficients
        ``(a, b, muzero)`` with ``len(a) == len(b) == n``.
    """
    n = check_points(n)
    as_endpt(endpt)
    alpha = _check_exponent("alpha", alpha)
    beta = _check_exponent("beta", beta)

    ab = alpha + beta
    abi = ab + 2.0
    # 2^(ab+1) Gamma(alpha+1) Gamma(beta+1) / Gamma(ab+2), all in log space
    muzero = float(
        np.exp(
            (ab + 1.0) * np.log(2.0)
            + gammaln(alpha + 1.0)
            + gammaln(beta + 1.0)
            - gammaln(abi)
        )
    )

    a = np.zeros(n)
    b = np.zeros(n)
    # the general formula is 0/0 at i = 1 when alpha + beta = 0
    a[0] = (beta - alpha) / abi
    b[0] = np.sqrt(4.0 * (alpha + 1.0) * (beta + 1.0) / ((ab + 3.0) * abi * abi))
    if n > 1:
        i = np.arange(2, n + 1, dtype=float)
        abi = ab + 2.0 * i
        a[1:] = (beta * beta - alpha * alpha) / ((abi - 2.0) * abi)
        b[1:] = np.sqrt(
            4.0 * i * (alpha + i) * (beta + i) * (ab + i)
            / ((abi * abi - 1.0) * abi * abi)
        )
    return RecurrenceCoefficients(a, b, muzero)


def laguerre_coeff(
    n: int, alpha: float = 0.0, endpt: EndPt | str = NEITHER
) -> RecurrenceCoefficients:
    """Generalised Laguerre weight ``x^alpha exp(-x)`` on ``(0, inf)``.

    Only the left end point ``x = 0`` can be fixed.
    """
    n = check_points(n)
    endpt = as_endpt(endpt)
    if endpt not in (NEITHER, LEFT):
        raise UnsupportedEndpointError(
            f"Laguerre rules support only neither/left end points, got {endpt.value}"
        )
    alpha = _check_exponent("alpha", alpha)
    i = np.arange(1, n + 1, dtype=float)
    a = 2.0 * i - 1.0 + alpha
    b = np.sqrt(i * (alpha + i))
    return RecurrenceCoefficients(a, b, float(gamma(alpha + 1.0)))


def hermite_coeff(n: int, endpt: EndPt | str = NEITHER) -> RecurrenceCoefficients:
    """Hermite weight ``exp(-x^2)`` on the whole real line."""
    n = check_points(n)
    endpt = as_endpt(endpt)
    if endpt is not NEITHER:
        raise UnsupportedEndpointError(
            f"Hermite rules have no finite end points, got {endpt.value}"
        )
    i = np.arange(1, n + 1, dtype=float)
    a = np.zeros(n)
    b = np.sqrt(0.5 * i)
    return RecurrenceCoefficients(a, b, float(np.sqrt(np.pi)))


COEFFICIENTS: Dict[str, Callable[..., RecurrenceCoefficients]] = {
    "legendre": legendre_coeff,
    "chebyshev": chebyshev_coeff,
    "jacobi": jacobi_coeff,
    "laguerre": laguerre_coeff,
    "hermite": hermite_coeff,
}

INTERVALS: Dict[str, Tuple[float, float]] = {
    "legendre": (-1.0, 1.0),
    "chebyshev": (-1.0, 1.0),
    "jacobi": (-1.0, 1.0),
    "laguerre": (0.0, np.inf),
    "hermite": (-np.inf, np.inf),
}


def recurrence_coefficients(
    family: str, n: int, *params, endpt: EndPt | str = NEITHER
) -> RecurrenceCoefficients:
    """Dispatch to the provider registered under ``family`` in :data:`COEFFICIENTS`."""
    try:
        provider = COEFFICIENTS[family]
    except KeyError:
        raise InvalidParameterError(f"Unknown family: {family!r}") from None
    return provider(n, *params, endpt=endpt)
