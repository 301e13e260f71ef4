"""
fbmgen - Exact Fractional Gaussian Noise and Brownian Motion Generation.

A Python package for drawing exact sample paths of stationary Gaussian
processes with the circulant embedding method of Dietrich & Newsam.

    Features
    --------
    - Fractional Gaussian noise with unit horizon or physical time step
    - Fractional Brownian motion as cumulated noise increments
    - Two independent paths per circulant embedding
    - Process / Stationary abstractions with closed-form covariances
- Replayable random sources for bit-exact regression tests

Quick Start
-----------
>>> import numpy as np
>>> from fbmgen import fractional_motion
>>> rng = np.random.default_rng(42)
>>> path = fractional_motion(1025, hurst=0.7, step=1 / 1024, rng=rng)

References
----------
Dietrich, C.R. and Newsam, G.N., 1997. Fast and exact simulation of stationary
Gaussian processes through circulant embedding of the covariance matrix.
SIAM Journal on Scientific Computing, 18(4), pp.1088-1107.
DOI: 10.1137/S1064827592240555

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"

# Processes
from .processes import (
    Process,
    Stationary,
    fractional_noise_cov,
    fractional_motion_cov,
)

# Generators
from .generators import (
    EIGENVALUE_TOLERANCE,
    chirp_transform,
    embedding_row,
    circulant_eigenvalues,
    circulant_embedding,
    SamplePath,
    FractionalNoise,
    FractionalMotion,
    fractional_noise,
    fractional_motion,
    time_grid,
)

# Random sources
from .sources import ReplaySource, as_source

__all__ = [
    # Version
    "__version__",
    # Processes
    "Process",
    "Stationary",
    "fractional_noise_cov",
    "fractional_motion_cov",
    # Circulant embedding
    "EIGENVALUE_TOLERANCE",
    "chirp_transform",
    "embedding_row",
    "circulant_eigenvalues",
    "circulant_embedding",
    # Paths and generators
    "SamplePath",
    "FractionalNoise",
    "FractionalMotion",
    "fractional_noise",
    "fractional_motion",
    "time_grid",
    # Random sources
    "ReplaySource",
    "as_source",
]
