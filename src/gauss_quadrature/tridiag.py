"""Symmetric tridiagonal linear algebra for the Golub--Welsch algorithm.

Two primitives are provided:

* :func:`solve_shifted` -- the last component of ``(J_n - shift I) delta = e_n``,
  needed for the Radau and Lobatto modifications of the Jacobi matrix;
* :func:`tridiag_eigen` -- all eigenvalues of ``J_n`` together with the
  squared first components of the normalised eigenvectors, by implicit-shift
  QL iteration (or LAPACK, via :func:`scipy.linalg.eigh_tridiagonal`).

The QL kernel only carries the first row of the eigenvector matrix through
the plane rotations, so its cost is ``O(n^2)`` rather than ``O(n^3)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple
import math

import numpy as np
from numpy.typing import ArrayLike
from scipy.linalg import eigh_tridiagonal
import numba as nb

from .exceptions import DegenerateShiftError

__all__ = [
    "EigenOptions",
    "solve_shifted",
    "tridiag_eigen",
]


@dataclass
class EigenOptions:
    """Configuration for :func:`tridiag_eigen`."""

    method: Literal["ql", "lapack"] = "ql"
    compiled: bool = True
    max_iter: int = 30
    verbose: bool = False


def solve_shifted(n: int, shift: float, a: ArrayLike, b: ArrayLike) -> float:
    """Shifted elimination used to move an end point into the spectrum of ``J_n``.

    ``J_n`` is the symmetric tridiagonal matrix with diagonal ``a`` and
    off-diagonal ``b``.  Forward elimination runs over the leading ``n - 1``
    rows of ``J_n - shift I`` only, because ``a[n-1]`` is the entry the caller
    replaces; the result is the last component of the solution of
    ``(J_{n-1} - shift I) delta = e_{n-1}``.

    Raises
    ------
    DegenerateShiftError
        If a pivot vanishes, i.e. ``shift`` is an eigenvalue of a leading
        principal submatrix of ``J_{n-1}``.
    """
    shift = float(shift)
    t = float(a[0]) - shift
    for i in range(1, n - 1):
        if t == 0.0:
            raise DegenerateShiftError(
                f"zero pivot at row {i} for shift {shift}"
            )
        t = float(a[i]) - shift - float(b[i - 1]) ** 2 / t
    if t == 0.0:
        raise DegenerateShiftError(f"zero final pivot for shift {shift}")
    return 1.0 / t


def _imtql_py(
    d: np.ndarray,
    e: np.ndarray,
    z: np.ndarray,
    eps: float,
    max_iter: int,
) -> Tuple[int, int]:
    """Implicit QL iteration on ``(d, e)``, rotating the row vector ``z``.

    On exit ``d`` holds the eigenvalues (unordered) and ``z`` the first
    components of the eigenvectors when ``z`` entered as ``e_1``.  ``e`` must
    have length ``n`` with ``e[n-1] == 0``; it is destroyed.

    Returns ``(ierr, sweeps)`` where ``ierr`` is zero on success and
    ``l + 1`` if eigenvalue ``l`` failed to converge in ``max_iter`` sweeps.
    """
    n = d.shape[0]
    sweeps = 0
    for l in range(n):
        j = 0
        while True:
            # look for a small off-diagonal element to split the matrix
            m = l
            while m < n - 1:
                if abs(e[m]) <= eps * (abs(d[m]) + abs(d[m + 1])):
                    break
                m += 1
            if m == l:
                break
            if j >= max_iter:
                return l + 1, sweeps
            j += 1
            sweeps += 1

            # Wilkinson-type shift from the leading 2x2 block
            p = d[l]
            g = (d[l + 1] - p) / (2.0 * e[l])
            r = math.hypot(g, 1.0)
            g = d[m] - p + e[l] / (g + math.copysign(r, g))
            s = 1.0
            c = 1.0
            p = 0.0
            underflow = False
            i = m - 1
            while i >= l:
                f = s * e[i]
                b = c * e[i]
                r = math.hypot(f, g)
                e[i + 1] = r
                if r == 0.0:
                    d[i + 1] -= p
                    e[m] = 0.0
                    underflow = True
                    break
                s = f / r
                c = g / r
                g = d[i + 1] - p
                r = (d[i] - g) * s + 2.0 * c * b
                p = s * r
                d[i + 1] = g + p
                g = c * r - b
                f = z[i + 1]
                z[i + 1] = s * z[i] + c * f
                z[i] = c * z[i] - s * f
                i -= 1
            if underflow:
                continue
            d[l] -= p
            e[l] = g
            e[m] = 0.0
    return 0, sweeps


_imtql = nb.njit(cache=True)(_imtql_py)


def tridiag_eigen(
    d: ArrayLike,
    e: ArrayLike,
    options: EigenOptions | None = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Eigenvalues and squared first eigenvector components of a tridiagonal matrix.

    Parameters
    ----------
    d : array_like
        Diagonal, length ``n >= 1``.
    e : array_like
        Off-diagonal, length ``n - 1``.
    options : EigenOptions, optional
        Solver selection and iteration limits.

    Returns
    -------
    lam : ndarray
        The ``n`` eigenvalues, in no particular order.
    v0sq : ndarray
        ``v0sq[j]`` is the square of the first component of the normalised
        eigenvector belonging to ``lam[j]``.

    Raises
    ------
    numpy.linalg.LinAlgError
        If the QL iteration does not converge.
    """
    opt = options or EigenOptions()
    d = np.array(d, dtype=float)
    e = np.asarray(e, dtype=float)
    n = d.size
    if n < 1:
        raise ValueError("n must be positive")
    if e.size != n - 1:
        raise ValueError(f"off-diagonal must have length {n - 1}, got {e.size}")
    if n == 1:
        return d, np.ones(1)

    if opt.method == "lapack":
        lam, vecs = eigh_tridiagonal(d, e)
        if opt.verbose:
            print(f"lapack: n={n}")
        return lam, vecs[0] ** 2
    if opt.method != "ql":
        raise ValueError(f"Unknown method: {opt.method}")

    work = np.zeros(n)
    work[: n - 1] = e
    z = np.zeros(n)
    z[0] = 1.0
    kernel = _imtql if opt.compiled else _imtql_py
    ierr, sweeps = kernel(d, work, z, float(np.finfo(float).eps), int(opt.max_iter))
    if ierr:
        raise np.linalg.LinAlgError(
            f"QL iteration failed to converge for eigenvalue {ierr - 1} "
            f"after {opt.max_iter} sweeps"
        )
    if opt.verbose:
        print(f"imtql: n={n}, sweeps={sweeps}")
    return d, z * z
