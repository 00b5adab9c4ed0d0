from collections import Counter
from typing import Iterable, List, Tuple

from nltk.tokenize import WhitespaceTokenizer

from lexsim.config import AnalysisConfig, normalize_term
from lexsim.text_processor.base import BaseTextProcessor, Profile


class StandardTextProcessor(BaseTextProcessor):
    """
    Turns raw document text into a normalized word-frequency Profile.

    Tokens are whitespace-delimited, stripped of every non-alphanumeric ASCII
    character and uppercased. Stop-words are excluded from the term counts but
    still count toward the document's total word count, which is the
    denominator used for normalization.
    """
    def __init__(self, config: AnalysisConfig = None):
        super().__init__(config)
        self.tokenizer = WhitespaceTokenizer()

    def tokenize(self, text: str) -> List[str]:
        """
        Split text on whitespace and normalize each token.

        Args:
            text (str): Raw document text

        Returns:
            List[str]: Normalized, non-empty terms in document order
        """
        tokens = (normalize_term(t) for t in self.tokenizer.tokenize(text))
        return [t for t in tokens if t]

    def count_terms(self, chunks: Iterable[str]) -> Tuple[Counter, int]:
        """
        Count retained terms over a stream of text chunks.

        Chunks are tokenized independently, so they must break on whitespace
        (lines read from a file do).

        Returns:
            Tuple[Counter, int]: Term counts (stop-words excluded) and the total
                                 number of non-empty tokens (stop-words included)
        """
        stop_words = self.config.stop_words
        term_counts = Counter()
        total_words = 0
        for chunk in chunks:
            for term in self.tokenize(chunk):
                total_words += 1
                if term not in stop_words:
                    term_counts[term] += 1
        return term_counts, total_words

    def select_top_terms(self, term_counts: Counter, total_words: int) -> Profile:
        """
        Keep the most frequent terms and normalize them by the total word count.

        Terms are ordered by count descending, then alphabetically, so the
        cut-off at top_term_count is reproducible.
        """
        if total_words == 0:
            return Profile({}, 0)
        ranked = sorted(term_counts.items(), key=lambda x: (-x[1], x[0]))
        top_terms = ranked[:self.config.top_term_count]
        return Profile({term: count / total_words for term, count in top_terms}, total_words)

    def profile_text(self, text: str) -> Profile:
        term_counts, total_words = self.count_terms([text])
        return self.select_top_terms(term_counts, total_words)

    def profile_stream(self, stream: Iterable[str]) -> Profile:
        """Profile a text stream (e.g. an open file) in a single pass."""
        term_counts, total_words = self.count_terms(stream)
        return self.select_top_terms(term_counts, total_words)

    def profile_file(self, filepath: str) -> Profile:
        with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
            return self.profile_stream(f)
