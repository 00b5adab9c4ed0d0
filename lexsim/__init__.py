"""
Lexical document similarity: top-term frequency profiles scored pairwise.
"""
from lexsim.config import AnalysisConfig
from lexsim.text_processor import Profile, StandardTextProcessor
from lexsim.corpus import StandardCorpus, DocumentFailure, CorpusBuildError
from lexsim.similarity import SimilarityMatrix, StandardScorer, ScorerFactory
from lexsim.ranking import SimilarPair, select_top_pairs
from lexsim.pipeline import AnalysisResult, analyze, analyze_directory

__version__ = "1.0.0"
