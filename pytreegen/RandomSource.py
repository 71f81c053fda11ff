"""
Random source
=============

All randomised generators draw from an explicit :class:`RandomSource` rather
than from a module-level generator, so a fixed seed reproduces a fixed tree.
The source is a thin wrapper around :class:`numpy.random.Generator` adding the
three draws tree generation needs: a uniform integer (``next``), a skewed
integer (``wnext``) and a uniform pair of distinct integers (``nextp``).

A source is a sequential stream. Sharing one between threads without external
locking breaks determinism.
"""

import math
from typing import Any, MutableSequence, Tuple, Union

import numpy as np


class RandomSource:
    """Seedable stream of the draws used by the tree generators.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, optional
        Seed for ``numpy.random.default_rng``. An existing ``Generator`` is
        used as is. ``None`` seeds from fresh OS entropy.
    """

    def __init__(self, seed: Union[int, np.random.Generator, None] = None):
        if isinstance(seed, np.random.Generator):
            self.generator = seed
        else:
            self.generator = np.random.default_rng(seed)

    def next(self, n: int) -> int:
        """Uniform integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("upper bound must be positive")
        return int(self.generator.integers(0, n))

    def wnext(self, n: int, elongation: int) -> int:
        """Skewed integer in ``[0, n)``.

        Parameters
        ----------
        n : int
            Exclusive upper bound, must be positive.
        elongation : int
            Skew of the draw. ``0`` is uniform. A positive value is distributed
            like the maximum of ``elongation + 1`` uniform draws, pulling the
            result towards ``n - 1``; a negative value like the minimum of
            ``1 - elongation`` draws, pulling it towards ``0``.

        Returns
        -------
        int
            The drawn integer.
        """

        if n <= 0:
            raise ValueError("upper bound must be positive")
        if elongation == 0:
            return self.next(n)

        u = self.generator.random()
        if elongation > 0:
            x = n * u ** (1.0 / (elongation + 1))
        else:
            x = n * (1.0 - u ** (1.0 / (1 - elongation)))
        return min(int(x), n - 1)

    def nextp(self, n: int) -> Tuple[int, int]:
        """Uniform unordered pair of distinct integers in ``[0, n)``.

        A single index is drawn from the ``C(n, 2)`` pairs enumerated as
        ``(0, 1), (0, 2), (1, 2), (0, 3), ...`` and decoded back into a pair.

        Returns
        -------
        Tuple[int, int]
            ``(u, v)`` with ``u < v``.
        """

        if n < 2:
            raise ValueError("need at least two values to draw a pair")
        index = int(self.generator.integers(0, n * (n - 1) // 2))
        v = (1 + math.isqrt(1 + 8 * index)) // 2
        u = index - v * (v - 1) // 2
        return u, v

    def random_array(self, size: int, n: int) -> np.ndarray:
        """Array of ``size`` independent uniform integers in ``[0, n)``."""
        if size < 0:
            raise ValueError("array size must be non-negative")
        if n <= 0:
            raise ValueError("upper bound must be positive")
        return self.generator.integers(0, n, size=size)

    def permutation(self, n: int) -> np.ndarray:
        """Uniformly random permutation of ``range(n)``."""
        return self.generator.permutation(n)

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffle a sequence in place."""
        items = [seq[i] for i in self.generator.permutation(len(seq)).tolist()]
        for i, item in enumerate(items):
            seq[i] = item


def check_random_source(
    rng: Union[None, int, np.random.Generator, RandomSource],
) -> RandomSource:
    """Turn the ``rng`` argument accepted across the package into a source.

    Parameters
    ----------
    rng : None, int, numpy.random.Generator or RandomSource
        ``None`` gives an unseeded source, an ``int`` a seeded one, a numpy
        ``Generator`` is wrapped and a ``RandomSource`` is returned unchanged.

    Returns
    -------
    RandomSource
    """

    if isinstance(rng, RandomSource):
        return rng
    if rng is None or isinstance(rng, (int, np.integer, np.random.Generator)):
        return RandomSource(rng)
    raise ValueError(f"cannot use {rng!r} as a random source")
