"""
Fractional Gaussian noise and fractional Brownian motion generators.

Fractional Gaussian noise (fGn) is sampled exactly with the circulant
embedding of its autocovariance. Fractional Brownian motion (fBm) is the
running sum of fGn increments, started at the origin.

Two parameterisations of the noise are available:

1. **Unit horizon** (``step=None``):
   The unit-step autocovariance is embedded and the path is rescaled by
   (1/n)^H, so that n increments span a horizon of length 1.

2. **Physical step** (``step > 0``):
   The autocovariance carries the factor step^{2H} and no rescaling is
   applied; each increment has variance step^{2H}.

License: BSD-3-Clause
"""

import operator

import numpy as np

from ..processes.base import Process, Stationary
from ..processes.covariance import fractional_motion_cov, fractional_noise_cov
from ..sources import as_source
from .circulant import circulant_embedding
from .path import SamplePath


def _check_hurst(hurst: float) -> float:
    if not 0 < hurst < 1:
        raise ValueError(f"Hurst exponent must be in (0, 1), got {hurst}")
    return float(hurst)


def _check_count(count: int) -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"Number of points must be >= 0, got {count}")
    return count


class FractionalNoise(Stationary):
    """
    Fractional Gaussian noise.

    Parameters
    ----------
    hurst : float
        Hurst exponent H in (0, 1). H < 0.5 gives anti-correlated increments,
        H > 0.5 long-range dependence, H = 0.5 white noise.
    step : float, optional
        Physical time step between consecutive increments (step > 0). If None,
        the unit-step model is used and paths are normalised to a unit
        horizon. Default is None.

    Raises
    ------
    ValueError
        If ``hurst`` is outside (0, 1) or ``step`` is not positive.

    Examples
    --------
    >>> import numpy as np
    >>> from fbmgen import FractionalNoise
    >>> rng = np.random.default_rng(42)
    >>> path = FractionalNoise(0.3).sample(128, rng=rng)
    >>> values = path.to_numpy()
    """

    __slots__ = ("_hurst", "_step", "_variance")

    def __init__(self, hurst: float, step: float | None = None):
        self._hurst = _check_hurst(hurst)
        if step is None:
            self._step = None
            self._variance = 1.0
        else:
            if not step > 0:
                raise ValueError(f"Step must be > 0, got {step}")
            self._step = float(step)
            self._variance = self._step ** (2.0 * self._hurst)

    @property
    def hurst(self) -> float:
        return self._hurst

    @property
    def step(self) -> float | None:
        return self._step

    def __repr__(self) -> str:
        return f"FractionalNoise(hurst={self._hurst}, step={self._step})"

    def autocov(self, distance) -> float:
        return self._variance * fractional_noise_cov(distance, self._hurst)

    def cov(self, t, s) -> float:
        if t < 0 or s < 0:
            raise ValueError(f"Indices must be >= 0, got ({t}, {s})")
        return super().cov(t, s)

    def path_scale(self, n: int) -> float:
        """
        Factor applied to the unscaled embedding output for n increments.

        (1/n)^H for the unit-horizon model, 1 when a physical step is set.
        """
        if self._step is not None:
            return 1.0
        return (1.0 / n) ** self._hurst

    def sample(
        self,
        count: int,
        rng=None,
        check_spectrum: bool = True,
        verbose: bool = False,
    ) -> SamplePath:
        """
        Draw a sample path of ``count`` values.

        Parameters
        ----------
        count : int
            Number of values (count ≥ 0).
        rng : numpy.random.Generator, int, array_like or source, optional
            Random source, resolved with :func:`fbmgen.sources.as_source`.
        check_spectrum : bool, optional
            Validate the circulant spectrum. Default is True.
        verbose : bool, optional
            If True, print generation parameters. Default is False.

        Returns
        -------
        path : SamplePath
            One-shot path of length ``count``.

        Notes
        -----
        A single value is drawn directly from N(0, var()) without the
        circulant embedding; longer paths use it with n = count − 1.
        """
        count = _check_count(count)
        source = as_source(rng)

        if verbose:
            self._report(count)

        if count == 0:
            return SamplePath([])
        if count == 1:
            return SamplePath([np.sqrt(self.var()) * source.standard_normal()])

        n = count - 1
        z = circulant_embedding(self, n, rng=source, check_spectrum=check_spectrum)
        return SamplePath(self.path_scale(n) * z.real[:count])

    def sample_pair(
        self,
        count: int,
        rng=None,
        check_spectrum: bool = True,
        verbose: bool = False,
    ) -> tuple[SamplePath, SamplePath]:
        """
        Draw two independent sample paths of ``count`` values.

        Both paths come out of a single circulant embedding (its real and
        imaginary parts), so they cost the same as one call to :meth:`sample`.
        For ``count == 1`` two independent marginal draws are made, the first
        path's draw first.

        Parameters
        ----------
        count : int
            Number of values per path (count ≥ 0).
        rng : numpy.random.Generator, int, array_like or source, optional
            Random source, resolved with :func:`fbmgen.sources.as_source`.
        check_spectrum : bool, optional
            Validate the circulant spectrum. Default is True.
        verbose : bool, optional
            If True, print generation parameters. Default is False.

        Returns
        -------
        first, second : SamplePath
            Two independent one-shot paths of length ``count``.
        """
        count = _check_count(count)
        source = as_source(rng)

        if verbose:
            self._report(count)

        if count == 0:
            return SamplePath([]), SamplePath([])
        if count == 1:
            sd = np.sqrt(self.var())
            first = sd * source.standard_normal()
            second = sd * source.standard_normal()
            return SamplePath([first]), SamplePath([second])

        n = count - 1
        z = circulant_embedding(self, n, rng=source, check_spectrum=check_spectrum)
        scale = self.path_scale(n)
        return SamplePath(scale * z.real[:count]), SamplePath(scale * z.imag[:count])

    def _report(self, count: int) -> None:
        print("Fractional Gaussian Noise (circulant embedding):")
        print(f"    hurst = {self._hurst}")
        print(f"    step = {self._step if self._step is not None else 'unit horizon'}")
        print(f"    count = {count}")
        if count >= 2:
            print(f"    embedding size = {2 * (count - 1)}")


class FractionalMotion(Process):
    """
    Fractional Brownian motion started at the origin.

    Parameters
    ----------
    hurst : float
        Hurst exponent H in (0, 1).

    Raises
    ------
    ValueError
        If ``hurst`` is outside (0, 1).

    Examples
    --------
    >>> import numpy as np
    >>> from fbmgen import FractionalMotion
    >>> rng = np.random.default_rng(42)
    >>> path = FractionalMotion(0.7).sample(101, step=0.01, rng=rng)
    >>> values = path.to_numpy()
    >>> values[0]
    0.0
    """

    __slots__ = ("_hurst",)

    def __init__(self, hurst: float):
        self._hurst = _check_hurst(hurst)

    @property
    def hurst(self) -> float:
        return self._hurst

    def __repr__(self) -> str:
        return f"FractionalMotion(hurst={self._hurst})"

    def cov(self, t, s) -> float:
        if t < 0 or s < 0:
            raise ValueError(f"Times must be >= 0, got ({t}, {s})")
        return fractional_motion_cov(t, s, self._hurst)

    def sample(
        self,
        points: int,
        step: float = 1.0,
        rng=None,
        check_spectrum: bool = True,
        verbose: bool = False,
    ) -> SamplePath:
        """
        Draw a sample path at times 0, step, 2·step, …

        Parameters
        ----------
        points : int
            Number of values, including the origin (points ≥ 0).
        step : float, optional
            Time step between consecutive values (step > 0). Default is 1.0.
        rng : numpy.random.Generator, int, array_like or source, optional
            Random source, resolved with :func:`fbmgen.sources.as_source`.
        check_spectrum : bool, optional
            Validate the circulant spectrum. Default is True.
        verbose : bool, optional
            If True, print generation parameters. Default is False.

        Returns
        -------
        path : SamplePath
            One-shot path of length ``points`` whose first value is 0.
            Position i holds the sum of the first i noise increments, so
            position 1 is the first increment itself.
        """
        points = _check_count(points)
        noise = FractionalNoise(self._hurst, step)

        if verbose:
            print("Fractional Brownian Motion (cumulated fGn):")
            print(f"    hurst = {self._hurst}")
            print(f"    step = {noise.step}")
            print(f"    points = {points}")

        if points == 0:
            return SamplePath([])
        if points == 1:
            return SamplePath([0.0])

        increments = noise.sample(points - 1, rng=rng, check_spectrum=check_spectrum)
        data = np.zeros(points)
        data[1:] = np.cumsum(increments.to_numpy())
        return SamplePath(data)


def fractional_noise(
    count: int,
    hurst: float = 0.5,
    step: float | None = None,
    rng=None,
    verbose: bool = False,
) -> np.ndarray:
    """
    Generate a fractional Gaussian noise path.

    Parameters
    ----------
    count : int
        Number of values (count ≥ 0).
    hurst : float, optional
        Hurst exponent H in (0, 1). Default is 0.5.
    step : float, optional
        Physical time step (step > 0). If None, the path is normalised to a
        unit horizon. Default is None.
    rng : numpy.random.Generator, optional
        Random number generator for reproducibility. If None, uses numpy's
        default RNG. Default is None.
    verbose : bool, optional
        If True, print generation parameters. Default is False.

    Returns
    -------
    x : ndarray
        Noise values with shape (count,).

    Raises
    ------
    ValueError
        If parameters are outside valid ranges.

    Examples
    --------
    >>> import numpy as np
    >>> from fbmgen import fractional_noise
    >>> rng = np.random.default_rng(42)
    >>> x = fractional_noise(1024, hurst=0.8, rng=rng)
    """
    noise = FractionalNoise(hurst, step)
    return noise.sample(count, rng=rng, verbose=verbose).to_numpy()


def fractional_motion(
    points: int,
    hurst: float = 0.5,
    step: float = 1.0,
    rng=None,
    verbose: bool = False,
) -> np.ndarray:
    """
    Generate a fractional Brownian motion path.

    Parameters
    ----------
    points : int
        Number of values including the origin (points ≥ 0).
    hurst : float, optional
        Hurst exponent H in (0, 1). Default is 0.5.
    step : float, optional
        Time step between values (step > 0). Default is 1.0.
    rng : numpy.random.Generator, optional
        Random number generator for reproducibility. If None, uses numpy's
        default RNG. Default is None.
    verbose : bool, optional
        If True, print generation parameters. Default is False.

    Returns
    -------
    b : ndarray
        Motion values with shape (points,), b[0] == 0.

    Examples
    --------
    >>> import numpy as np
    >>> from fbmgen import fractional_motion, time_grid
    >>> rng = np.random.default_rng(42)
    >>> b = fractional_motion(257, hurst=0.3, step=1 / 256, rng=rng)
    >>> t = time_grid(257, step=1 / 256)
    """
    motion = FractionalMotion(hurst)
    return motion.sample(points, step=step, rng=rng, verbose=verbose).to_numpy()


def time_grid(points: int, step: float = 1.0) -> np.ndarray:
    """Times 0, step, …, (points − 1)·step matching a motion path."""
    points = _check_count(points)
    if not step > 0:
        raise ValueError(f"Step must be > 0, got {step}")
    return np.arange(points) * step
