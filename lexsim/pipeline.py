"""
Similarity Pipeline

Runs the four stages in order: profile every document into a corpus, score
all pairs, then select the most similar ones. The corpus is fully built
before scoring starts and is only read afterwards.
"""
import logging
from typing import List, NamedTuple

from lexsim.config import AnalysisConfig
from lexsim.corpus import StandardCorpus
from lexsim.performance_monitoring import Profiler
from lexsim.ranking import SimilarPair, select_top_pairs
from lexsim.similarity import ScorerFactory, SimilarityMatrix

logger = logging.getLogger(__name__)


class AnalysisResult(NamedTuple):
    corpus: StandardCorpus
    matrix: SimilarityMatrix
    pairs: List[SimilarPair]

    @property
    def names(self) -> List[str]:
        return self.corpus.names


def analyze_corpus(corpus: StandardCorpus, config: AnalysisConfig = None, scorer_mode: str = 'auto',
                   profiler: Profiler = None, sparse_threshold: int = None) -> AnalysisResult:
    """Score an already built corpus and select its top pairs."""
    config = config or corpus.config
    profiler = profiler or corpus.profiler

    scorer = ScorerFactory.create_scorer(scorer_mode, profiler,
                                         doc_count=corpus.doc_count,
                                         sparse_threshold=sparse_threshold)
    matrix = scorer.score(corpus)

    with profiler.timer("Top Pair Selection"):
        pairs = select_top_pairs(matrix, config.top_pair_count)

    logger.info(f"Selected {len(pairs)} of {matrix.pair_count} pairs")
    return AnalysisResult(corpus, matrix, pairs)


def analyze(documents: List[str], config: AnalysisConfig = None, scorer_mode: str = 'auto',
            profiler: Profiler = None, fail_fast: bool = False,
            sparse_threshold: int = None) -> AnalysisResult:
    """
    Profile the given documents and report their most similar pairs.

    Args:
        documents (List[str]): Paths of plain-text documents, in corpus order
        config (AnalysisConfig, optional): Profiling and ranking parameters
        scorer_mode (str): 'auto', 'standard' or 'sparse'
        profiler (Profiler, optional): Performance profiler for timing stages
        fail_fast (bool): Abort on the first unreadable document instead of skipping it
        sparse_threshold (int, optional): Document count from which 'auto' uses the sparse scorer

    Returns:
        AnalysisResult: The corpus, the full similarity matrix and the top pairs
    """
    config = config or AnalysisConfig()
    profiler = profiler or Profiler()
    corpus = StandardCorpus(config, profiler=profiler, fail_fast=fail_fast).build(documents)
    return analyze_corpus(corpus, config, scorer_mode, profiler, sparse_threshold)


def analyze_directory(documents_dir: str, config: AnalysisConfig = None, scorer_mode: str = 'auto',
                      profiler: Profiler = None, fail_fast: bool = False, file_extension: str = '.txt',
                      sparse_threshold: int = None) -> AnalysisResult:
    """Run the pipeline over every matching file in a directory."""
    config = config or AnalysisConfig()
    profiler = profiler or Profiler()
    corpus = StandardCorpus(config, profiler=profiler, fail_fast=fail_fast,
                            file_extension=file_extension)
    corpus.build_from_directory(documents_dir)
    return analyze_corpus(corpus, config, scorer_mode, profiler, sparse_threshold)
