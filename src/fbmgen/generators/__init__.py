"""
Sample path generators.

This module provides exact samplers for stationary Gaussian processes built
on the circulant embedding of the covariance matrix:

- Circulant embedding engine (two independent paths per call)
- Fractional Gaussian noise (unit horizon or physical step)
- Fractional Brownian motion (cumulated fractional Gaussian noise)

Generated paths are one-shot :class:`SamplePath` iterators; the functional
helpers `fractional_noise` and `fractional_motion` return plain arrays.
"""

from .circulant import (
    EIGENVALUE_TOLERANCE,
    chirp_transform,
    embedding_row,
    circulant_eigenvalues,
    circulant_embedding,
)
from .path import SamplePath
from .fractional import (
    FractionalNoise,
    FractionalMotion,
    fractional_noise,
    fractional_motion,
    time_grid,
)

__all__ = [
    # Circulant embedding
    "EIGENVALUE_TOLERANCE",
    "chirp_transform",
    "embedding_row",
    "circulant_eigenvalues",
    "circulant_embedding",
    # Paths
    "SamplePath",
    # Fractional processes
    "FractionalNoise",
    "FractionalMotion",
    "fractional_noise",
    "fractional_motion",
    "time_grid",
]
