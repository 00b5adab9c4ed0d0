from lexsim.corpus.base import BaseCorpus, CorpusBuildError, DocumentFailure
from lexsim.corpus.standard_corpus import StandardCorpus

__all__ = [
    'BaseCorpus',
    'CorpusBuildError',
    'DocumentFailure',
    'StandardCorpus'
]
