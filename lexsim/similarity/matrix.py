from types import MappingProxyType
from typing import Dict, Iterator, Tuple

import numpy as np


class SimilarityMatrix:
    """
    Symmetric table of pairwise document similarity scores.

    One score is stored per unordered pair (i < j), so score(i, j) and
    score(j, i) are the same value. The diagonal is never computed.

    Attributes:
        size (int): Number of documents the matrix covers
    """
    def __init__(self, size: int, scores: Dict[Tuple[int, int], float]):
        for i, j in scores:
            if not 0 <= i < j < size:
                raise ValueError(f"Invalid pair ({i}, {j}) for a matrix of size {size}")
        self.size = size
        self._scores = MappingProxyType(dict(scores))

    @property
    def pair_count(self) -> int:
        return self.size * (self.size - 1) // 2

    def get(self, i: int, j: int) -> float:
        """
        Return the similarity of documents i and j.

        Pairs the scorer skipped (no shared vocabulary) score 0.0.

        Raises:
            ValueError: If i == j (self-similarity is not computed)
            IndexError: If either index is outside the matrix
        """
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"Pair ({i}, {j}) outside matrix of size {self.size}")
        if i == j:
            raise ValueError(f"Self-similarity is not computed (document {i})")
        key = (i, j) if i < j else (j, i)
        return self._scores.get(key, 0.0)

    def __getitem__(self, pair: Tuple[int, int]) -> float:
        return self.get(*pair)

    def pairs(self) -> Iterator[Tuple[int, int, float]]:
        """Yield (i, j, score) for every i < j in row-major order."""
        for i in range(self.size):
            for j in range(i + 1, self.size):
                yield i, j, self._scores.get((i, j), 0.0)

    def to_dense(self) -> np.ndarray:
        """Full |D| x |D| array with a zero diagonal."""
        dense = np.zeros((self.size, self.size), dtype=np.float64)
        for (i, j), score in self._scores.items():
            dense[i, j] = score
            dense[j, i] = score
        return dense
