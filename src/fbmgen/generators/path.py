"""
One-shot sample paths.

License: BSD-3-Clause
"""

import numpy as np


class SamplePath:
    """
    A finite sample path with a forward-only cursor.

    Iterating over a path consumes it: once exhausted, further iteration
    yields nothing. Draw a new path to start over.

    Parameters
    ----------
    data : array_like
        Values of the path, in order.

    Examples
    --------
    >>> path = SamplePath([0.0, 0.3, -0.1])
    >>> len(path)
    3
    >>> next(path)
    0.0
    >>> list(path)
    [0.3, -0.1]
    >>> list(path)
    []
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data):
        self._data = np.asarray(data, dtype=float)
        if self._data.ndim != 1:
            raise ValueError(f"Expected 1D array, got shape {self._data.shape}")
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return self

    def __next__(self) -> float:
        if self._position >= len(self._data):
            raise StopIteration
        state = float(self._data[self._position])
        self._position += 1
        return state

    def __repr__(self) -> str:
        return f"SamplePath(length={len(self._data)}, position={self._position})"

    @property
    def position(self) -> int:
        """Number of values already read."""
        return self._position

    def to_numpy(self) -> np.ndarray:
        """Copy of the whole path, independent of the cursor."""
        return self._data.copy()
