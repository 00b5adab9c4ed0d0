"""
Lexical Document Similarity

Builds a top-term frequency profile for every plain-text document in a
directory, scores every pair of documents by the dot product of their
profiles over shared terms, and reports the most similar pairs.
"""

import argparse
import json
import logging
import sys

from lexsim.corpus import CorpusBuildError, StandardCorpus
from lexsim.performance_monitoring import Profiler
from lexsim.pipeline import analyze_corpus
from lexsim.ranking import format_pair, pairs_to_records
from lexsim.similarity import ScorerFactory
from lexsim.utils import (build_analysis_config, display_dependencies, display_detailed_statistics,
                          display_vocabulary_statistics, load_config, setup_logging,
                          validate_run_settings)

logger = logging.getLogger("lexsim")

# Command-line options that override values from the configuration file
OVERRIDABLE = ('documents_dir', 'file_extension', 'stopwords_file', 'top_term_count',
               'top_pair_count', 'scorer_mode', 'sparse_scorer_threshold', 'log_file')


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Options left unset fall back to the configuration file, which in turn
    falls back to built-in defaults.

    Returns:
        argparse.Namespace: The parsed command-line arguments
    """
    parser = argparse.ArgumentParser(description='Lexical similarity between plain-text documents.')
    parser.add_argument('--config', default='config.json',
                        help='Path to configuration file (default: config.json)')
    parser.add_argument('--documents_dir', default=None,
                        help='Directory containing documents to compare')
    parser.add_argument('--file_extension', default=None,
                        help='Extension of the documents to read (default: .txt)')
    parser.add_argument('--stopwords_file', default=None,
                        help='File with one stop-word per line, replacing the default set')
    parser.add_argument('--top_term_count', type=int, default=None,
                        help='Number of terms kept in each document profile (default: 100)')
    parser.add_argument('--top_pair_count', '--top_k', type=int, default=None,
                        help='Number of most similar pairs to report (default: 10)')
    parser.add_argument('--scorer_mode', choices=ScorerFactory.MODES, default=None,
                        help='Similarity scorer implementation (default: auto)')
    parser.add_argument('--sparse_scorer_threshold', type=int, default=None,
                        help='Document count from which auto mode uses the sparse scorer')
    parser.add_argument('--fail_fast', action='store_true',
                        help='Abort on the first unreadable document instead of skipping it')
    parser.add_argument('--export_json', default=None,
                        help='Write the top pairs to a JSON file')
    parser.add_argument('--report', default=None,
                        help='Write the timing report to a file')
    parser.add_argument('--log_file', default=None,
                        help='Also write log messages to this file')
    parser.add_argument('--stats', action='store_true',
                        help='Display detailed corpus statistics')
    parser.add_argument('--check_deps', action='store_true',
                        help='Check and display available dependencies')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def resolve_settings(args):
    """Merge the configuration file with the options given on the command line."""
    settings = load_config(args.config)
    for key in OVERRIDABLE:
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    settings['fail_fast'] = args.fail_fast or bool(settings.get('fail_fast'))
    return settings


def export_results(result, filepath):
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(pairs_to_records(result.pairs, result.names), f, indent=2)


def main(argv=None):
    """
    Main function to run the document similarity analysis.

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    settings = resolve_settings(args)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, settings.get('log_file'))

    if args.check_deps:
        display_dependencies(ScorerFactory.check_dependencies())

    try:
        validate_run_settings(settings)
        config = build_analysis_config(settings)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    profiler = Profiler()
    profiler.start_global_timer()

    corpus = StandardCorpus(config, profiler=profiler, fail_fast=settings['fail_fast'],
                            file_extension=settings['file_extension'])
    try:
        corpus.build_from_directory(settings['documents_dir'])
    except (FileNotFoundError, CorpusBuildError) as e:
        logger.error(str(e))
        return 1

    result = analyze_corpus(corpus, config, settings['scorer_mode'], profiler,
                            sparse_threshold=settings['sparse_scorer_threshold'])

    if args.stats:
        display_vocabulary_statistics(corpus)
        display_detailed_statistics(corpus)

    if not result.pairs:
        print("No document pairs to compare.")
    for pair in result.pairs:
        print(format_pair(pair, result.names))

    if args.export_json:
        export_results(result, args.export_json)
        print(f"Results exported to {args.export_json}")

    report = profiler.generate_report(doc_count=corpus.doc_count,
                                      pair_count=result.matrix.pair_count,
                                      filename=args.report)
    logger.debug("\n" + report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
