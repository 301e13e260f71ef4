"""
Abstract stochastic processes.

A :class:`Process` exposes a covariance function over pairs of indices. A
:class:`Stationary` process is one whose covariance depends only on the
distance between the two indices; it exposes that dependence through
:meth:`Stationary.autocov`.

License: BSD-3-Clause
"""

from abc import ABC, abstractmethod

import numpy as np


class Process(ABC):
    """A stochastic process over an index set."""

    __slots__ = ()

    @abstractmethod
    def cov(self, t, s) -> float:
        """Covariance between the states at indices ``t`` and ``s``."""

    def var(self, t) -> float:
        """Variance of the state at index ``t``."""
        return self.cov(t, t)

    def cov_matrix(self, indices) -> np.ndarray:
        """
        Dense covariance matrix over a set of indices.

        Parameters
        ----------
        indices : array_like
            1D sequence of indices.

        Returns
        -------
        C : ndarray
            Matrix with ``C[i, j] = cov(indices[i], indices[j])``.
        """
        indices = list(indices)
        size = len(indices)
        C = np.empty((size, size))
        for i, t in enumerate(indices):
            for j in range(i, size):
                C[i, j] = C[j, i] = self.cov(t, indices[j])
        return C


class Stationary(Process):
    """
    A stationary process.

    Subclasses implement :meth:`autocov`; the pairwise covariance and the
    variance follow from it.
    """

    __slots__ = ()

    #: Distance between an index and itself.
    zero_distance = 0

    @abstractmethod
    def autocov(self, distance) -> float:
        """Covariance between two states ``distance`` apart."""

    def cov(self, t, s) -> float:
        return self.autocov(s - t if t < s else t - s)

    def var(self, t=None) -> float:
        """Variance of the process; identical at every index."""
        return self.autocov(self.zero_distance)
