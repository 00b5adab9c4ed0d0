"""
Sparse Similarity Scorer

Scenario:
 - numpy, scipy, and sklearn available
 - corpus large enough that a Python loop over every pair hurts

Profiles are vectorized into a CSR document-term matrix and the pairwise dot
products come out of a single sparse matrix product. Only the strict upper
triangle of the product is kept, so the resulting matrix is still symmetric
by construction.
"""
import numpy as np
from scipy.sparse import triu
from sklearn.feature_extraction import DictVectorizer
from sklearn.metrics.pairwise import linear_kernel

from lexsim.corpus import BaseCorpus
from lexsim.similarity.base import BaseScorer
from lexsim.similarity.matrix import SimilarityMatrix


class SparseScorer(BaseScorer):
    """
    Sparse matrix scorer built on scikit-learn and SciPy.

    Attributes:
        vectorizer (DictVectorizer): Maps profile terms to matrix columns
    """
    def __init__(self, profiler=None):
        super().__init__(profiler)
        self.vectorizer = DictVectorizer(dtype=np.float64, sparse=True, sort=True)

    def _build_doc_term_matrix(self, corpus: BaseCorpus):
        with self.profiler.timer("Sparse Matrix Construction"):
            return self.vectorizer.fit_transform([dict(profile) for profile in corpus.profiles])

    def score(self, corpus: BaseCorpus) -> SimilarityMatrix:
        doc_count = corpus.doc_count
        if doc_count < 2 or all(len(profile) == 0 for profile in corpus.profiles):
            return SimilarityMatrix(doc_count, {})

        try:
            doc_term_matrix = self._build_doc_term_matrix(corpus)
        except ValueError as e:
            raise RuntimeError(f"Failed to build sparse matrix: {e}") from e

        with self.profiler.timer("Similarity Calculation (sparse)"):
            # Unnormalized dot products: X @ X.T
            products = linear_kernel(doc_term_matrix, dense_output=False)
            upper = triu(products, k=1).tocoo()
            scores = {
                (int(i), int(j)): float(score)
                for i, j, score in zip(upper.row, upper.col, upper.data)
            }

        return SimilarityMatrix(doc_count, scores)
