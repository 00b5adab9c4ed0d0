"""
Standard Document Corpus

Builds the ordered collection of document profiles that the similarity
scorers work on. Documents are profiled one at a time in input order; the
position of a document in the corpus is its index in the similarity matrix.
"""
import logging
import os
from collections import Counter
from typing import List, Tuple, Dict, Any, Optional

from lexsim.config import AnalysisConfig
from lexsim.corpus.base import BaseCorpus, CorpusBuildError, DocumentFailure
from lexsim.performance_monitoring import Profiler
from lexsim.text_processor import Profile, StandardTextProcessor

logger = logging.getLogger(__name__)


class StandardCorpus(BaseCorpus):
    """
    Sequential corpus builder.

    A document that cannot be read is skipped and recorded in ``failures``;
    with ``fail_fast=True`` the first failure is raised as CorpusBuildError
    instead.

    Attributes:
        config (AnalysisConfig): Profiling parameters
        processor (StandardTextProcessor): Text processor used for profiling
        failures (List[DocumentFailure]): Documents skipped during building
    """
    def __init__(self, config: AnalysisConfig = None, processor: StandardTextProcessor = None,
                 profiler: Profiler = None, fail_fast: bool = False, file_extension: str = '.txt'):
        self.config = config or AnalysisConfig()
        self.processor = processor or StandardTextProcessor(self.config)
        self.profiler = profiler or Profiler()
        self.fail_fast = fail_fast
        self.file_extension = file_extension

        self._names = []          # doc_id -> document name
        self._profiles = []       # doc_id -> Profile
        self._doc_ids = {}        # document name -> doc_id
        self.failures = []

    @property
    def doc_count(self) -> int:
        return len(self._profiles)

    @property
    def vocab_size(self) -> int:
        vocabulary = set()
        for profile in self._profiles:
            vocabulary.update(profile)
        return len(vocabulary)

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def profiles(self) -> List[Profile]:
        return list(self._profiles)

    def __len__(self) -> int:
        return self.doc_count

    def list_documents(self, documents_dir: str) -> List[str]:
        """
        List the documents in a directory that carry the configured extension.

        Paths are sorted by file name so repeated runs see the same order.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if not os.path.isdir(documents_dir):
            raise FileNotFoundError(f"Documents directory not found: {documents_dir}")
        return sorted(entry.path for entry in os.scandir(documents_dir)
                      if entry.is_file() and entry.name.endswith(self.file_extension))

    def build_from_directory(self, documents_dir: str) -> 'StandardCorpus':
        return self.build(self.list_documents(documents_dir))

    def build(self, documents: List[str]) -> 'StandardCorpus':
        """
        Profile every document in order and add it to the corpus.

        Args:
            documents (List[str]): Paths of the documents to profile

        Returns:
            StandardCorpus: The corpus instance (self)

        Raises:
            CorpusBuildError: In fail-fast mode, when a document cannot be read
        """
        seen = set(self._doc_ids)
        with self.profiler.timer("Corpus Building"):
            for filepath in documents:
                if filepath in seen:
                    logger.warning(f"Skipping duplicate document {filepath}")
                    continue
                seen.add(filepath)
                profile = self._process_single_file(filepath)
                if profile is not None:
                    self.add_document(filepath, profile)

        logger.info(f"Built corpus of {self.doc_count} documents "
                    f"({len(self.failures)} skipped, {self.vocab_size} profile terms)")
        return self

    def _process_single_file(self, filepath: str) -> Optional[Profile]:
        try:
            return self.processor.profile_file(filepath)
        except (OSError, UnicodeError) as e:
            failure = DocumentFailure(filepath, "read", str(e))
            if self.fail_fast:
                raise CorpusBuildError(failure) from e
            logger.warning(f"Skipping {filepath}: could not read document ({e})")
            self.failures.append(failure)
            return None

    def add_document(self, name: str, profile: Profile) -> int:
        if name in self._doc_ids:
            raise ValueError(f"Document already in corpus: {name}")
        doc_id = len(self._profiles)
        self._names.append(name)
        self._profiles.append(profile)
        self._doc_ids[name] = doc_id
        return doc_id

    def add_text(self, name: str, text: str) -> int:
        """Profile in-memory text and add it under the given name."""
        return self.add_document(name, self.processor.profile_text(text))

    def get_doc_id(self, name: str) -> int:
        return self._doc_ids[name]

    def get_profile(self, doc_id: int) -> Profile:
        return self._profiles[doc_id]

    def get_most_frequent_terms(self, n: int = 10) -> List[Tuple[str, int]]:
        """Most frequent profile terms across the corpus, by summed raw count."""
        term_totals = Counter()
        for profile in self._profiles:
            for term in profile:
                term_totals[term] += profile.count(term)
        return sorted(term_totals.items(), key=lambda x: (-x[1], x[0]))[:n]

    def get_statistics(self) -> Dict[str, Any]:
        doc_lengths = [profile.total_words for profile in self._profiles]
        profile_sizes = [len(profile) for profile in self._profiles]

        return {
            "document_count": self.doc_count,
            "vocabulary_size": self.vocab_size,
            "avg_doc_length": sum(doc_lengths) / max(1, len(doc_lengths)),
            "max_doc_length": max(doc_lengths) if doc_lengths else 0,
            "min_doc_length": min(doc_lengths) if doc_lengths else 0,
            "avg_profile_size": sum(profile_sizes) / max(1, len(profile_sizes)),
            "empty_documents": sum(1 for size in profile_sizes if size == 0),
            "failed_documents": len(self.failures),
        }
