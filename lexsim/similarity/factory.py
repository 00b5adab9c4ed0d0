"""
Similarity Scorer Factory

This module selects a scorer implementation based on the requested mode,
the available numerical libraries and the number of documents to score.
"""
import importlib
import logging
from typing import Dict, Optional

from lexsim.performance_monitoring import Profiler
from lexsim.similarity.base import BaseScorer

logger = logging.getLogger(__name__)


class ScorerFactory:
    """
    Factory class for creating similarity scorers.

    Class Attributes:
        DEFAULT_SPARSE_DOC_THRESHOLD (int): Document count from which 'auto'
                                            prefers the sparse scorer
        SCORER_CLASSES (Dict[str, str]): Mapping of mode names to class paths
    """

    DEFAULT_SPARSE_DOC_THRESHOLD = 200

    SCORER_CLASSES = {
        "sparse": "sparse_scorer.SparseScorer",
        "standard": "standard_scorer.StandardScorer"
    }

    MODES = ('auto', 'standard', 'sparse')

    @staticmethod
    def check_dependencies() -> Dict[str, bool]:
        """
        Check for availability of the sparse scorer's libraries.

        Returns:
            Dict[str, bool]: Dictionary mapping dependency names to availability status
        """
        dependencies = {}
        for name in ("numpy", "scipy.sparse", "sklearn.feature_extraction", "sklearn.metrics.pairwise"):
            try:
                importlib.import_module(name)
                dependencies[name] = True
            except ImportError:
                dependencies[name] = False
        return dependencies

    @staticmethod
    def create_scorer(mode: str = 'auto', profiler: Optional[Profiler] = None,
                      doc_count: int = None, sparse_threshold: int = None) -> BaseScorer:
        """
        Create and return the scorer for the requested mode.

        Args:
            mode (str): 'auto', 'standard' or 'sparse'
            profiler (Profiler, optional): Performance profiler for timing operations
            doc_count (int, optional): Number of documents to be scored ('auto' only)
            sparse_threshold (int, optional): Document count from which 'auto'
                                              selects the sparse scorer

        Returns:
            BaseScorer: An instance of the selected scorer

        Raises:
            ValueError: If the mode is unknown
            ImportError: If 'sparse' is requested explicitly and its libraries
                         are missing
        """
        if mode not in ScorerFactory.MODES:
            raise ValueError(f"Unknown scorer mode '{mode}', expected one of {ScorerFactory.MODES}")

        if sparse_threshold is None:
            sparse_threshold = ScorerFactory.DEFAULT_SPARSE_DOC_THRESHOLD
        if isinstance(sparse_threshold, bool) or not isinstance(sparse_threshold, int) or sparse_threshold <= 0:
            raise ValueError(f"sparse_threshold must be a positive integer, got {sparse_threshold!r}")

        if profiler is None:
            profiler = Profiler()

        has_sparse = all(ScorerFactory.check_dependencies().values())

        if mode == 'auto':
            if has_sparse and doc_count is not None and doc_count >= sparse_threshold:
                mode = 'sparse'
            else:
                mode = 'standard'
            profiler.log_message(f"Auto-selected scorer mode: {mode} "
                                 f"(doc_count={doc_count}, threshold={sparse_threshold}, "
                                 f"sparse libraries={'available' if has_sparse else 'unavailable'})")
        elif mode == 'sparse' and not has_sparse:
            raise ImportError("Sparse scorer requested but numpy, scipy or scikit-learn is not installed")

        module_name, class_name = ScorerFactory.SCORER_CLASSES[mode].rsplit(".", 1)
        module = importlib.import_module(f"lexsim.similarity.{module_name}")
        logger.debug(f"Created scorer implementation: {module_name}.{class_name}")
        return getattr(module, class_name)(profiler)
