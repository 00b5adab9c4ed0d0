"""
Standard Similarity Scorer

Single-threaded, pure Python scorer. Profiles hold at most top_term_count
terms, so each pair costs one pass over the smaller profile with dictionary
probes into the larger one.
"""
from typing import Mapping

from lexsim.corpus import BaseCorpus
from lexsim.similarity.base import BaseScorer
from lexsim.similarity.matrix import SimilarityMatrix


def dot_product(profile_a: Mapping[str, float], profile_b: Mapping[str, float]) -> float:
    """
    Sparse dot product of two profiles over their shared terms.

    Args:
        profile_a: Term weights of the first document
        profile_b: Term weights of the second document

    Returns:
        float: Sum of weight products for terms present in both; 0.0 if none
    """
    if len(profile_a) > len(profile_b):
        profile_a, profile_b = profile_b, profile_a
    return sum((weight * profile_b[term] for term, weight in profile_a.items() if term in profile_b), 0.0)


class StandardScorer(BaseScorer):
    def score(self, corpus: BaseCorpus) -> SimilarityMatrix:
        profiles = corpus.profiles
        doc_count = len(profiles)

        with self.profiler.timer("Similarity Calculation (standard)"):
            # Upper triangle only; the matrix mirrors each value
            scores = {
                (i, j): dot_product(profiles[i], profiles[j])
                for i in range(doc_count)
                for j in range(i + 1, doc_count)
            }

        return SimilarityMatrix(doc_count, scores)
