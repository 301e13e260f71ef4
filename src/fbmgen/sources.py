"""
Random-draw sources for the samplers.

Every sampler in this package consumes standard-normal draws through a single
method, ``standard_normal(size=None)``, which is the interface of
:class:`numpy.random.Generator`. Anything that provides it can be used as a
source, including :class:`ReplaySource`, which plays back a recorded sequence
of draws so that sample paths can be regression-tested bit for bit.

License: BSD-3-Clause
"""

import operator

import numpy as np


class ReplaySource:
    """
    Source that returns previously recorded standard-normal draws.

    Draws are handed out strictly in the order they were recorded, one call
    after the other, which is the order the circulant embedding consumes them.

    Parameters
    ----------
    draws : array_like
        1D sequence of recorded standard-normal values.

    Examples
    --------
    >>> source = ReplaySource([0.5, -1.0, 2.0])
    >>> source.standard_normal()
    0.5
    >>> source.standard_normal(2)
    array([-1.,  2.])
    """

    def __init__(self, draws):
        draws = np.asarray(draws, dtype=float)
        if draws.ndim != 1:
            raise ValueError(f"Expected 1D array of draws, got shape {draws.shape}")
        self._draws = draws
        self._position = 0

    @property
    def consumed(self) -> int:
        """Number of draws handed out so far."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of draws still available."""
        return len(self._draws) - self._position

    def standard_normal(self, size: int | None = None) -> float | np.ndarray:
        """
        Return the next recorded draw(s).

        Parameters
        ----------
        size : int, optional
            Number of draws. If None, a single float is returned.

        Returns
        -------
        out : float or ndarray
            The next draw, or an array with the next ``size`` draws.

        Raises
        ------
        ValueError
            If fewer than the requested number of draws remain.
        """
        count = 1 if size is None else operator.index(size)
        if count < 0:
            raise ValueError(f"Number of draws must be >= 0, got {count}")
        if count > self.remaining:
            raise ValueError(
                f"Requested {count} draws but only {self.remaining} recorded draws remain"
            )
        start = self._position
        self._position += count
        if size is None:
            return float(self._draws[start])
        return self._draws[start : start + count].copy()


def as_source(rng=None):
    """
    Resolve ``rng`` into an object with a ``standard_normal`` method.

    Parameters
    ----------
    rng : None, int, Generator, array_like or source, optional
        - Any object with a ``standard_normal`` method is returned as is
          (``numpy.random.Generator``, ``numpy.random.RandomState``,
          :class:`ReplaySource`).
        - A list, tuple or ndarray of floats is wrapped in a
          :class:`ReplaySource`.
        - Anything else (None, an integer seed, a ``SeedSequence``) is passed
          to ``numpy.random.default_rng``.

    Returns
    -------
    source : object
        Random source with a ``standard_normal(size=None)`` method.
    """
    if hasattr(rng, "standard_normal"):
        return rng
    if isinstance(rng, (list, tuple, np.ndarray)):
        return ReplaySource(rng)
    return np.random.default_rng(rng)
