import numpy as np
from numpy.typing import ArrayLike

from .exceptions import InvalidParameterError

__all__ = [
    "orthonormal_poly",
]


def orthonormal_poly(x: ArrayLike, a: ArrayLike, b: ArrayLike, muzero: float) -> np.ndarray:
    """
    Evaluate the orthonormal polynomials p_0 … p_n defined by a recurrence.

    Parameters
    ----------
    x : array_like
        Evaluation points (flattened).
    a, b : array_like
        Recurrence coefficients, ``len(b) >= len(a) == n``.
    muzero : float
        Zeroth moment of the weight function.

    Returns
    -------
    p : np.ndarray
        Array of shape (m, n + 1) with p[i, k] == p_k(x[i]).
    """
    x = np.asarray(x, dtype=float).ravel()
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    n = a.size
    if n < 1:
        raise InvalidParameterError("need at least one recurrence coefficient")
    if b.size < n:
        raise InvalidParameterError(f"b must have at least {n} entries, got {b.size}")
    if not muzero > 0.0:
        raise InvalidParameterError(f"muzero must be positive, got {muzero}")

    p = np.empty((x.size, n + 1))
    p[:, 0] = 1.0 / np.sqrt(muzero)
    p[:, 1] = (x - a[0]) * p[:, 0] / b[0]

    # b[k-1] p_k = (x - a[k-1]) p_{k-1} - b[k-2] p_{k-2}
    for k in range(2, n + 1):
        p[:, k] = ((x - a[k - 1]) * p[:, k - 1] - b[k - 2] * p[:, k - 2]) / b[k - 1]
    return p
