"""
Top-K Pair Selection

Extracts the most similar document pairs from a SimilarityMatrix. Pairs are
ordered by score descending; equal scores are ordered by ascending
(doc_a, doc_b) so results are reproducible.
"""
import heapq
from typing import List, NamedTuple, Sequence

from lexsim.config import DEFAULT_TOP_PAIR_COUNT
from lexsim.similarity import SimilarityMatrix


class SimilarPair(NamedTuple):
    """A scored document pair, doc_a < doc_b."""
    doc_a: int
    doc_b: int
    score: float


def select_top_pairs(matrix: SimilarityMatrix, k: int = DEFAULT_TOP_PAIR_COUNT) -> List[SimilarPair]:
    """
    Return the k highest-scoring pairs of the matrix.

    A bounded heap keeps memory at O(k) regardless of corpus size. Pairs
    with a zero score are still eligible, so the result length is always
    min(k, number of pairs).

    Args:
        matrix (SimilarityMatrix): Pairwise scores
        k (int): Number of pairs to return

    Returns:
        List[SimilarPair]: Pairs sorted by score descending, then (doc_a, doc_b)
    """
    if k <= 0:
        return []
    top = heapq.nsmallest(k, matrix.pairs(), key=lambda p: (-p[2], p[0], p[1]))
    return [SimilarPair(i, j, score) for i, j, score in top]


def format_pair(pair: SimilarPair, names: Sequence[str]) -> str:
    return f'Similarity between "{names[pair.doc_a]}" and "{names[pair.doc_b]}" is {pair.score}'


def pairs_to_records(pairs: List[SimilarPair], names: Sequence[str]) -> List[dict]:
    """Structured form of the result, one record per pair."""
    return [
        {"document_a": names[p.doc_a], "document_b": names[p.doc_b], "score": p.score}
        for p in pairs
    ]
