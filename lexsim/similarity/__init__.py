# lexsim/similarity/__init__.py
from .matrix import SimilarityMatrix
from .base import BaseScorer
from .standard_scorer import StandardScorer, dot_product
from .factory import ScorerFactory
