"""Gauss, Radau and Lobatto rules by the Golub--Welsch algorithm.

The nodes of an ``n``-point rule are the eigenvalues of the Jacobi matrix
``J_n`` built from the recurrence coefficients, and the weights are
``muzero`` times the squared first components of the normalised
eigenvectors.  Fixing one or both end points modifies the last row and
column of ``J_n`` so that its spectrum contains them (Golub, SIAM Review
15, 1973, section 7).

References
----------
G. H. Golub and J. H. Welsch, Calculation of Gauss quadrature rules,
Math. Comp. 23 (1969), 221--230.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import (
    DegenerateShiftError,
    InsufficientPointsError,
    InvalidParameterError,
    UnsupportedEndpointError,
)
from .recurrence import (
    BOTH,
    COEFFICIENTS,
    INTERVALS,
    LEFT,
    NEITHER,
    EndPt,
    as_endpt,
    chebyshev_coeff,
    hermite_coeff,
    jacobi_coeff,
    laguerre_coeff,
    legendre_coeff,
)
from .tridiag import EigenOptions, solve_shifted, tridiag_eigen

__all__ = [
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
]


class QuadratureRule(NamedTuple):
    """Nodes in ascending order and their (positive) weights."""

    nodes: np.ndarray
    weights: np.ndarray

    @property
    def muzero(self) -> float:
        return float(np.sum(self.weights))

    def integrate(self, f: Callable[[np.ndarray], ArrayLike]):
        """Apply the rule to a vectorised integrand ``f``."""
        return np.sum(self.weights * np.asarray(f(self.nodes)))


def adjust_endpoints(
    lo: float,
    hi: float,
    a: ArrayLike,
    b: ArrayLike,
    endpt: EndPt | str,
) -> Tuple[np.ndarray, np.ndarray]:
    """Modify the recurrence coefficients so that fixed end points become nodes.

    Only ``a[n-1]`` (and, for a Lobatto rule, ``b[n-2]``) change; the inputs
    are left untouched and fresh arrays are returned.

    Parameters
    ----------
    lo, hi : float
        Interval of the weight function.
    a, b : array_like
        Recurrence coefficients of equal length ``n``.
    endpt : EndPt or str
        ``LEFT`` fixes ``lo``, ``RIGHT`` fixes ``hi``, ``BOTH`` fixes both.

    Returns
    -------
    a, b : ndarray
        Adjusted copies of the coefficients.
    """
    endpt = as_endpt(endpt)
    a = np.array(a, dtype=float)
    b = np.array(b, dtype=float)
    n = a.size
    if endpt is NEITHER:
        return a, b

    if endpt is BOTH:
        if n < 2:
            raise InsufficientPointsError("Must have at least two points for both ends.")
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise UnsupportedEndpointError("Lobatto rules need a finite interval")
        g = solve_shifted(n, lo, a, b)
        t = (hi - lo) / (g - solve_shifted(n, hi, a, b))
        if not (np.isfinite(t) and t > 0.0):
            raise DegenerateShiftError(f"invalid Lobatto scale {t} on ({lo}, {hi})")
        b[n - 2] = np.sqrt(t)
        a[n - 1] = lo + g * t
        return a, b

    x = lo if endpt is LEFT else hi
    if not np.isfinite(x):
        raise UnsupportedEndpointError(f"cannot fix the infinite {endpt.value} end point")
    if n == 1:
        a[0] = x
    else:
        a[n - 1] = x + solve_shifted(n, x, a, b) * b[n - 2] ** 2
    return a, b


def custom_gauss_rule(
    lo: float,
    hi: float,
    a: ArrayLike,
    b: ArrayLike,
    muzero: float,
    endpt: EndPt | str = NEITHER,
    options: EigenOptions | None = None,
) -> QuadratureRule:
    """Quadrature rule for any weight with known recurrence coefficients.

    ``a`` and ``b`` are the coefficients of the three-term recurrence

        b[j] p_j(x) = (x - a[j]) p_{j-1}(x) - b[j-1] p_{j-2}(x)

    for the orthonormal polynomials of the weight ``w`` on ``(lo, hi)``, and
    ``muzero`` is the integral of ``w`` over ``(lo, hi)``.  The last entry of
    ``b`` is not used by the rule.
    """
    endpt = as_endpt(endpt)
    opt = options or EigenOptions()
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    n = a.size
    if a.ndim != 1 or b.shape != a.shape:
        raise InvalidParameterError(
            f"a and b must be 1-D of equal length, got {a.shape} and {b.shape}"
        )
    if n < 1:
        raise InvalidParameterError("n must be positive")
    if not muzero > 0.0:
        raise InvalidParameterError(f"muzero must be positive, got {muzero}")
    if not lo < hi:
        raise InvalidParameterError(f"empty interval ({lo}, {hi})")

    if endpt is not NEITHER:
        a, b = adjust_endpoints(lo, hi, a, b, endpt)
        if opt.verbose:
            print(f"{endpt.value} end point: a[{n - 1}]={a[-1]:.16e}")

    lam, v0sq = tridiag_eigen(a, b[: n - 1], opt)
    order = np.argsort(lam, kind="stable")
    return QuadratureRule(lam[order], muzero * v0sq[order])


def legendre(
    n: int, endpt: EndPt | str = NEITHER, options: EigenOptions | None = None
) -> QuadratureRule:
    """Gauss--Legendre rule on ``(-1, 1)``."""
    a, b, muzero = legendre_coeff(n, endpt)
    return custom_gauss_rule(-1.0, 1.0, a, b, muzero, endpt, options)


def chebyshev(
    n: int,
    kind: int = 1,
    endpt: EndPt | str = NEITHER,
    options: EigenOptions | None = None,
) -> QuadratureRule:
    """Gauss--Chebyshev rule of the first or second kind on ``(-1, 1)``."""
    a, b, muzero = chebyshev_coeff(n, kind, endpt)
    return custom_gauss_rule(-1.0, 1.0, a, b, muzero, endpt, options)


def jacobi(
    n: int,
    alpha: float,
    beta: float,
    endpt: EndPt | str = NEITHER,
    options: EigenOptions | None = None,
) -> QuadratureRule:
    """Gauss--Jacobi rule for ``(1 - x)^alpha (1 + x)^beta`` on ``(-1, 1)``."""
    a, b, muzero = jacobi_coeff(n, alpha, beta, endpt)
    return custom_gauss_rule(-1.0, 1.0, a, b, muzero, endpt, options)


def laguerre(
    n: int,
    alpha: float = 0.0,
    endpt: EndPt | str = NEITHER,
    options: EigenOptions | None = None,
) -> QuadratureRule:
    """Gauss--Laguerre rule for ``x^alpha exp(-x)`` on ``(0, inf)``."""
    a, b, muzero = laguerre_coeff(n, alpha, endpt)
    return custom_gauss_rule(0.0, np.inf, a, b, muzero, endpt, options)


def hermite(
    n: int, endpt: EndPt | str = NEITHER, options: EigenOptions | None = None
) -> QuadratureRule:
    """Gauss--Hermite rule for ``exp(-x^2)`` on the real line."""
    a, b, muzero = hermite_coeff(n, endpt)
    return custom_gauss_rule(-np.inf, np.inf, a, b, muzero, endpt, options)


def gauss_rule(
    family: str,
    n: int,
    *params,
    endpt: EndPt | str = NEITHER,
    options: EigenOptions | None = None,
) -> QuadratureRule:
    """Rule for the classical weight named ``family``.

    Examples
    --------
    >>> x, w = gauss_rule("jacobi", 8, 0.5, -0.5, endpt="both")
    """
    if family not in COEFFICIENTS:
        raise InvalidParameterError(f"Unknown family: {family!r}")
    a, b, muzero = COEFFICIENTS[family](n, *params, endpt=endpt)
    lo, hi = INTERVALS[family]
    return custom_gauss_rule(lo, hi, a, b, muzero, endpt, options)


def gauss_legendre_rule(
    a: float, b: float, n: int, endpt: EndPt | str = NEITHER
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Legendre rule (Gauss, Radau or Lobatto) on the interval [a, b].

    Returns
    -------
    x : ndarray
        Quadrature nodes.
    w : ndarray
        Corresponding weights.
    """
    nodes, weights = legendre(n, endpt)

    # affine map [-1,1] → [a,b]
    x = 0.5 * (b - a) * nodes + 0.5 * (b + a)
    w = 0.5 * (b - a) * weights
    return x, w
