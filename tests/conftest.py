"""
Pytest configuration and shared fixtures for the lexsim test suite.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so tests can import lexsim and main
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from lexsim.config import AnalysisConfig  # noqa: E402


@pytest.fixture
def config():
    return AnalysisConfig()


@pytest.fixture
def write_documents(tmp_path):
    """Write {filename: text} into a fresh documents directory and return its path."""
    def _write(documents, directory="documents"):
        documents_dir = tmp_path / directory
        documents_dir.mkdir(exist_ok=True)
        for name, text in documents.items():
            (documents_dir / name).write_text(text, encoding="utf-8")
        return documents_dir
    return _write


@pytest.fixture
def scenario_a_texts():
    return {
        "x.txt": "THE CAT SAT ON THE MAT",
        "y.txt": "A CAT SAT ON A HAT",
    }
