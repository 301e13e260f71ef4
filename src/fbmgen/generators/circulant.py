"""
Circulant embedding of stationary Gaussian processes.

The covariance matrix of n + 1 consecutive states of a stationary process is
embedded in a circulant matrix of size m = 2n. The eigenvalues of a circulant
matrix are the discrete Fourier transform of its first row, so the matrix can
be square-rooted in the frequency domain: complex white noise is scaled by the
square-root spectrum and transformed back, giving two independent sample paths
in the real and imaginary parts of the result.

References
----------
Dietrich, C.R. and Newsam, G.N., 1997. Fast and exact simulation of stationary
Gaussian processes through circulant embedding of the covariance matrix.
SIAM Journal on Scientific Computing, 18(4), pp.1088-1107.
DOI: 10.1137/S1064827592240555

Kroese, D.P., Taimre, T. and Botev, Z.I., 2011. Handbook of Monte Carlo
Methods. Wiley.

License: BSD-3-Clause
"""

import numpy as np
from scipy.signal import czt

from ..sources import as_source

#: Tolerance on the circulant spectrum, relative to the variance autocov(0):
#: imaginary parts must be smaller than this and real parts may not be more
#: negative than its opposite. Exact for unit-variance processes.
EIGENVALUE_TOLERANCE = 1e-10


def chirp_transform(
    data: np.ndarray,
    m: int,
    rotation: complex | None = None,
    scale: complex = 1 + 0j,
) -> np.ndarray:
    """
    Evaluate the chirp z-transform of ``data`` at ``m`` points.

        X[k] = Σ_j data[j] · scale^{-j} · rotation^{j·k},   k = 0, …, m − 1

    Parameters
    ----------
    data : array_like
        Real or complex 1D input.
    m : int
        Number of output points. Any positive length, not only powers of two.
    rotation : complex, optional
        Ratio between successive points on the contour. Default is the m-th
        root of unity exp(−2πi/m), for which the transform is the forward DFT.
    scale : complex, optional
        Starting point of the contour. Default is 1.

    Returns
    -------
    X : ndarray
        Complex array of length ``m``.
    """
    # With rotation=None scipy builds the DFT chirp from exact phases.
    return czt(data, m=m, w=rotation, a=scale)


def embedding_row(process, n: int) -> np.ndarray:
    """
    First row of the circulant matrix embedding ``process``.

    Parameters
    ----------
    process : Stationary
        Stationary process with integer lags.
    n : int
        Number of increments (n ≥ 1).

    Returns
    -------
    row : ndarray
        Real array of length m = 2n with ``row[0] = autocov(0)`` and
        ``row[i] = row[m - i] = autocov(i)`` for 1 ≤ i ≤ n.
    """
    if n < 1:
        raise ValueError(f"Circulant embedding requires n >= 1, got {n}")

    m = 2 * n
    row = np.empty(m)
    row[0] = process.autocov(0)
    for i in range(1, n + 1):
        row[i] = process.autocov(i)
        row[m - i] = row[i]
    return row


def circulant_eigenvalues(process, n: int, check_spectrum: bool = True) -> np.ndarray:
    """
    Eigenvalues of the circulant embedding of ``process``.

    Parameters
    ----------
    process : Stationary
        Stationary process with integer lags.
    n : int
        Number of increments (n ≥ 1).
    check_spectrum : bool, optional
        If True, assert that the spectrum is real and non-negative up to
        :data:`EIGENVALUE_TOLERANCE` times the variance ``autocov(0)``.
        Default is True.

    Returns
    -------
    eigenvalues : ndarray
        Complex array of length 2n.

    Raises
    ------
    AssertionError
        If ``check_spectrum`` is set and the spectrum is not valid, which
        means the autocovariance is not that of a stationary process.
    """
    row = embedding_row(process, n)
    m = len(row)
    eigenvalues = chirp_transform(row, m)

    if check_spectrum:
        # Rounding errors of the transform grow with the variance.
        tolerance = EIGENVALUE_TOLERANCE * (row[0] if row[0] > 0 else 1.0)
        worst_imag = np.max(np.abs(eigenvalues.imag))
        if worst_imag >= tolerance:
            raise AssertionError(
                f"Circulant spectrum is not real: max |imag| = {worst_imag:.3e} (m = {m})"
            )
        lowest = np.min(eigenvalues.real)
        if lowest <= -tolerance:
            raise AssertionError(
                f"Circulant spectrum is not non-negative: min eigenvalue = {lowest:.3e} (m = {m})"
            )

    return eigenvalues


def circulant_embedding(
    process,
    n: int,
    rng=None,
    check_spectrum: bool = True,
) -> np.ndarray:
    """
    Draw two independent sample paths of a stationary Gaussian process.

    Parameters
    ----------
    process : Stationary
        Stationary process with integer lags.
    n : int
        Number of increments (n ≥ 1).
    rng : numpy.random.Generator or source, optional
        Source of standard-normal draws, resolved with
        :func:`fbmgen.sources.as_source`. Exactly 4n draws are consumed,
        frequency by frequency, real part first.
    check_spectrum : bool, optional
        Validate the circulant spectrum before sampling. Default is True.

    Returns
    -------
    z : ndarray
        Complex array of length 2n. The real and imaginary parts of the first
        n + 1 entries are two independent, unscaled sample paths of
        ``process``; the remaining entries carry no extra information.

    Examples
    --------
    >>> import numpy as np
    >>> from fbmgen import FractionalNoise, circulant_embedding
    >>> rng = np.random.default_rng(42)
    >>> z = circulant_embedding(FractionalNoise(0.7), 63, rng=rng)
    >>> first, second = z.real[:64], z.imag[:64]
    """
    source = as_source(rng)
    eigenvalues = circulant_eigenvalues(process, n, check_spectrum=check_spectrum)
    m = len(eigenvalues)

    sigma = np.sqrt(np.maximum(eigenvalues.real, 0.0) / m)
    gaussians = np.asarray(source.standard_normal(2 * m), dtype=float)
    noise = sigma * (gaussians[0::2] + 1j * gaussians[1::2])

    return chirp_transform(noise, m)
