"""
Utility Functions

This module provides utility functions for loading and saving configuration,
reading stop-word files, setting up logging and displaying corpus statistics.
"""
import json
import logging
import os
from typing import Dict, List

from lexsim.config import (AnalysisConfig, DEFAULT_STOP_WORDS, DEFAULT_TOP_PAIR_COUNT,
                           DEFAULT_TOP_TERM_COUNT)
from lexsim.similarity import ScorerFactory

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Define a single default configuration dictionary
DEFAULT_CONFIG = {
    "documents_dir": "documents",
    "file_extension": ".txt",
    "stopwords_file": None,
    "top_term_count": DEFAULT_TOP_TERM_COUNT,
    "top_pair_count": DEFAULT_TOP_PAIR_COUNT,
    "scorer_mode": "auto",
    "sparse_scorer_threshold": ScorerFactory.DEFAULT_SPARSE_DOC_THRESHOLD,
    "fail_fast": False,
    "log_file": None
}


def load_config(config_file='config.json') -> Dict:
    """
    Load configuration from a JSON file, falling back to defaults if not found or invalid.

    Args:
        config_file (str): Path to the configuration file

    Returns:
        dict: The loaded or default configuration
    """
    if not os.path.exists(config_file):
        return _create_default_config(config_file)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError("top-level JSON value must be an object")
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading config file {config_file}: {e}. Using default configuration.")
        return dict(DEFAULT_CONFIG)

    # Merge with defaults to ensure all keys exist
    return {**DEFAULT_CONFIG, **config}


def save_config(config: Dict, config_file='config.json'):
    """
    Save the current configuration to a JSON file.

    Args:
        config (dict): The configuration to save
        config_file (str): Path to the configuration file
    """
    with open(config_file, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _create_default_config(config_file='config.json') -> Dict:
    try:
        save_config(DEFAULT_CONFIG, config_file)
        logger.info(f"Created default configuration file: {config_file}")
    except OSError as e:
        logger.warning(f"Could not create default configuration file: {e}")

    return dict(DEFAULT_CONFIG)


def load_stopwords(filepath: str) -> List[str]:
    """
    Read stop-words from a file, one per line. Blank lines are ignored.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, encoding="utf-8") as file:
        return [line.strip() for line in file if line.strip()]


def build_analysis_config(settings: Dict) -> AnalysisConfig:
    """
    Build the AnalysisConfig for a run from merged settings.

    Stop-words come from ``stop_words`` (or ``stopWords``) when present,
    otherwise from ``stopwords_file``, otherwise the built-in default set.
    """
    settings = dict(settings)
    if settings.get('stop_words') is None and settings.get('stopWords') is None:
        stopwords_file = settings.get('stopwords_file')
        settings['stop_words'] = load_stopwords(stopwords_file) if stopwords_file else DEFAULT_STOP_WORDS
    return AnalysisConfig.from_dict(settings)


def validate_run_settings(settings: Dict):
    """
    Check the run settings that are not part of AnalysisConfig.

    Raises:
        ValueError: If the scorer mode, sparse threshold or file extension is invalid
    """
    mode = settings.get('scorer_mode')
    if mode not in ScorerFactory.MODES:
        raise ValueError(f"Unknown scorer mode {mode!r}, expected one of {ScorerFactory.MODES}")
    threshold = settings.get('sparse_scorer_threshold')
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
        raise ValueError(f"sparse_scorer_threshold must be a positive integer, got {threshold!r}")
    if not isinstance(settings.get('file_extension'), str):
        raise ValueError(f"file_extension must be a string, got {settings.get('file_extension')!r}")


def setup_logging(level=logging.INFO, log_file: str = None):
    """Configure root logging with a console handler and an optional file handler."""
    handlers = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def display_vocabulary_statistics(corpus):
    """
    Display vocabulary statistics including count and most frequent terms.

    Args:
        corpus: The built corpus
    """
    print(f"The number of unique profile terms is: {corpus.vocab_size}")
    print("The top 10 most frequent terms are:")
    for i, (term, freq) in enumerate(corpus.get_most_frequent_terms(n=10), 1):
        print(f"    {i}. {term} ({freq:,})")
    print("=" * 55)


def display_detailed_statistics(corpus):
    """
    Display detailed statistics about the corpus, including skipped documents.

    Args:
        corpus (BaseCorpus): The corpus instance to analyze
    """
    stats = corpus.get_statistics()

    print("\n=== Corpus Statistics ===")
    print(f"Total Documents: {stats['document_count']:,}")
    print(f"Vocabulary Size: {stats['vocabulary_size']:,}")
    print(f"Average Document Length: {stats['avg_doc_length']:.2f} words")
    print(f"Max Document Length: {stats['max_doc_length']:,} words")
    print(f"Min Document Length: {stats['min_doc_length']:,} words")
    print(f"Average Profile Size: {stats['avg_profile_size']:.2f} terms")
    print(f"Empty Documents: {stats['empty_documents']:,}")
    print(f"Skipped Documents: {stats['failed_documents']:,}")

    for failure in getattr(corpus, 'failures', []):
        print(f"    {failure.document} ({failure.stage}): {failure.reason}")

    print("\n" + "=" * 56)


def display_dependencies(dependencies: Dict[str, bool]):
    """Display which optional scorer libraries are importable."""
    print("\n=== Available Dependencies ===")
    for name, available in dependencies.items():
        print(f"{name}: {'Available' if available else 'Not Available'}")
    print("Recommended scorer: " + ("Sparse" if all(dependencies.values()) else "Standard"))
    print("=" * 56)
