"""
Analysis Configuration

This module holds the fixed parameters of a similarity run: how many terms
are kept in each document profile, how many document pairs are reported and
which words are excluded as stop-words. The configuration object is immutable
and passed explicitly into the profiler, corpus builder and pair selector so
tests can vary it without touching module state.
"""
import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable

DEFAULT_TOP_TERM_COUNT = 100
DEFAULT_TOP_PAIR_COUNT = 10
DEFAULT_STOP_WORDS = frozenset({"A", "AND", "AN", "OF", "IN", "THE"})

# Anything that is not an ASCII letter or digit is stripped from a token
NON_ALNUM_PATTERN = re.compile(r'[^A-Za-z0-9]')


def normalize_term(token: str) -> str:
    """
    Normalize a raw token into a term.

    Every character that is not an ASCII letter or digit is removed and the
    remainder is uppercased. An empty string means the token carries no term.

    Args:
        token (str): Raw whitespace-delimited token

    Returns:
        str: The normalized term (possibly empty)
    """
    return NON_ALNUM_PATTERN.sub('', token).upper()


def normalize_stop_words(words: Iterable[str]) -> FrozenSet[str]:
    """Normalize stop-words with the same rules applied to document tokens."""
    normalized = (normalize_term(w) for w in words)
    return frozenset(w for w in normalized if w)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Immutable parameters for profiling and ranking.

    Attributes:
        top_term_count (int): Maximum number of terms kept in a document profile
        top_pair_count (int): Number of most similar pairs to report
        stop_words (FrozenSet[str]): Normalized terms excluded from profiles
    """
    top_term_count: int = DEFAULT_TOP_TERM_COUNT
    top_pair_count: int = DEFAULT_TOP_PAIR_COUNT
    stop_words: FrozenSet[str] = field(default=DEFAULT_STOP_WORDS)

    def __post_init__(self):
        if isinstance(self.top_term_count, bool) or not isinstance(self.top_term_count, int):
            raise ValueError(f"top_term_count must be an integer, got {self.top_term_count!r}")
        if self.top_term_count <= 0:
            raise ValueError(f"top_term_count must be positive, got {self.top_term_count}")
        if isinstance(self.top_pair_count, bool) or not isinstance(self.top_pair_count, int):
            raise ValueError(f"top_pair_count must be an integer, got {self.top_pair_count!r}")
        if self.top_pair_count <= 0:
            raise ValueError(f"top_pair_count must be positive, got {self.top_pair_count}")
        if isinstance(self.stop_words, str):
            raise ValueError("stop_words must be a collection of words, not a single string")
        # frozen dataclass: bypass __setattr__ to store the normalized set
        object.__setattr__(self, 'stop_words', normalize_stop_words(self.stop_words))

    def with_overrides(self, **overrides) -> 'AnalysisConfig':
        """Return a copy with the given fields replaced (None values are ignored)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, settings: dict) -> 'AnalysisConfig':
        """
        Build a configuration from a settings dictionary.

        Both the snake_case keys used in config.json and the camelCase option
        names (topTermCount, topPairCount, stopWords) are recognized. Unknown
        keys are ignored.

        Args:
            settings (dict): Settings as loaded from a configuration file

        Returns:
            AnalysisConfig: The validated configuration
        """
        aliases = {
            'topTermCount': 'top_term_count',
            'topPairCount': 'top_pair_count',
            'stopWords': 'stop_words',
        }
        values = {}
        for key, value in settings.items():
            key = aliases.get(key, key)
            if key in ('top_term_count', 'top_pair_count', 'stop_words') and value is not None:
                values[key] = value
        return cls(**values)
