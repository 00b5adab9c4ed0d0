"""
Base Similarity Scorer Interface

This module defines the abstract base class for all similarity scorer
implementations. A scorer turns a corpus of document profiles into a
SimilarityMatrix; the score of a pair is the dot product of the two profiles
over the terms they share, without magnitude normalization.
"""
from lexsim.corpus import BaseCorpus
from lexsim.performance_monitoring import Profiler
from lexsim.similarity.matrix import SimilarityMatrix


class BaseScorer:
    """
    Abstract base class for similarity scorers.

    Attributes:
        profiler (Profiler): Performance monitoring utility for timing operations
    """
    def __init__(self, profiler: Profiler = None):
        """
        Initialize the scorer.

        Args:
            profiler (Profiler, optional): Performance profiler for timing operations
        """
        self.profiler = profiler or Profiler()

    def score(self, corpus: BaseCorpus) -> SimilarityMatrix:
        """
        Score every unordered pair of distinct documents in the corpus.

        Args:
            corpus (BaseCorpus): Fully built corpus; it is only read

        Returns:
            SimilarityMatrix: Symmetric pairwise scores indexed by corpus position

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement score()")
