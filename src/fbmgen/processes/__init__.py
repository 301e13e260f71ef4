"""
Stochastic process abstractions and covariance models.

- Process / Stationary base classes
- Closed-form covariances of fractional Gaussian noise and fractional
  Brownian motion
"""

from .base import Process, Stationary
from .covariance import fractional_noise_cov, fractional_motion_cov

__all__ = [
    "Process",
    "Stationary",
    "fractional_noise_cov",
    "fractional_motion_cov",
]
