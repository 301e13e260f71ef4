"""
Covariance functions of fractional Gaussian noise and fractional Brownian motion.

Both functions accept scalars or numpy arrays and evaluate the closed forms
directly.

References
----------
Mandelbrot, B.B. and Van Ness, J.W., 1968. Fractional Brownian motions,
fractional noises and applications. SIAM Review, 10(4), pp.422-437.

License: BSD-3-Clause
"""

import numpy as np


def fractional_noise_cov(lag: np.ndarray | int, hurst: float) -> np.ndarray | float:
    """
    Autocovariance of unit-step fractional Gaussian noise.

        γ(k) = ½ · ((|k| + 1)^{2H} − 2|k|^{2H} + ||k| − 1|^{2H})

    Parameters
    ----------
    lag : int or array_like
        Lag(s) k between two increments. The sign is ignored.
    hurst : float
        Hurst exponent H in (0, 1).

    Returns
    -------
    gamma : float or ndarray
        Autocovariance at the given lag(s). ``gamma(0) == 1``.
    """
    lag = np.abs(lag)
    power = 2.0 * hurst
    return 0.5 * ((lag + 1.0) ** power - 2.0 * lag**power + np.abs(lag - 1.0) ** power)


def fractional_motion_cov(
    t: np.ndarray | float, s: np.ndarray | float, hurst: float
) -> np.ndarray | float:
    """
    Covariance of standard fractional Brownian motion.

        R(t, s) = ½ · (t^{2H} + s^{2H} − |t − s|^{2H})

    Parameters
    ----------
    t, s : float or array_like
        Non-negative times.
    hurst : float
        Hurst exponent H in (0, 1).

    Returns
    -------
    R : float or ndarray
        Covariance between B_H(t) and B_H(s).
    """
    power = 2.0 * hurst
    return 0.5 * (np.power(t, power) + np.power(s, power) - np.abs(np.subtract(t, s)) ** power)
