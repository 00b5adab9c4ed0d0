import io

import pytest

from lexsim.config import AnalysisConfig
from lexsim.text_processor import Profile, StandardTextProcessor


@pytest.fixture
def processor(config):
    return StandardTextProcessor(config)


def test_tokenize_splits_on_whitespace_and_normalizes(processor):
    assert processor.tokenize("Hello,  world!\n\tIt's 2024 -- ok") == [
        "HELLO", "WORLD", "ITS", "2024", "OK"
    ]


def test_unicode_whitespace_separates_tokens(processor):
    assert processor.tokenize("foo\u00a0bar") == ["FOO", "BAR"]


def test_scenario_a_profiles(processor, scenario_a_texts):
    x = processor.profile_text(scenario_a_texts["x.txt"])
    y = processor.profile_text(scenario_a_texts["y.txt"])

    assert x.total_words == 6
    assert y.total_words == 6
    assert dict(x) == pytest.approx({"CAT": 1 / 6, "SAT": 1 / 6, "ON": 1 / 6, "MAT": 1 / 6})
    assert dict(y) == pytest.approx({"CAT": 1 / 6, "SAT": 1 / 6, "ON": 1 / 6, "HAT": 1 / 6})


def test_stop_words_count_toward_total_but_not_terms(processor):
    profile = processor.profile_text("the the the dog")
    assert profile.total_words == 4
    assert dict(profile) == {"DOG": 0.25}


def test_punctuation_only_tokens_do_not_count(processor):
    profile = processor.profile_text("dog ... -- !! cat")
    assert profile.total_words == 2
    assert dict(profile) == {"DOG": 0.5, "CAT": 0.5}


def test_empty_document_yields_empty_profile(processor):
    for text in ["", "   \n ", "?! -- ..."]:
        profile = processor.profile_text(text)
        assert len(profile) == 0
        assert profile.total_words == 0


def test_document_of_only_stop_words(processor):
    profile = processor.profile_text("The and a of")
    assert len(profile) == 0
    assert profile.total_words == 4


def test_top_term_cut_off_is_deterministic():
    processor = StandardTextProcessor(AnalysisConfig(top_term_count=2))
    profile = processor.profile_text("zeta beta beta alpha gamma gamma")
    # BETA and GAMMA both occur twice; ALPHA and ZETA tie at one and are cut
    assert list(profile) == ["BETA", "GAMMA"]

    processor = StandardTextProcessor(AnalysisConfig(top_term_count=3))
    profile = processor.profile_text("zeta beta beta alpha gamma gamma")
    assert list(profile) == ["BETA", "GAMMA", "ALPHA"]
    # Normalization uses the true total, not the truncated count
    assert profile["ALPHA"] == pytest.approx(1 / 6)


def test_profile_bounds():
    processor = StandardTextProcessor(AnalysisConfig(top_term_count=100))
    text = " ".join(f"word{i} " * (i % 7 + 1) for i in range(250))
    profile = processor.profile_text(text)

    assert len(profile) == 100
    assert all(0 < weight <= 1.0 for weight in profile.values())
    assert sum(profile.values()) <= 1.0


def test_custom_stop_words():
    processor = StandardTextProcessor(AnalysisConfig(stop_words={"dog"}))
    profile = processor.profile_text("the dog")
    assert dict(profile) == {"THE": 0.5}


def test_profile_stream_matches_profile_text(processor):
    text = "one fish\ntwo fish\nred fish\nblue fish\n"
    from_stream = processor.profile_stream(io.StringIO(text))
    from_text = processor.profile_text(text)
    assert dict(from_stream) == dict(from_text)
    assert from_stream.total_words == from_text.total_words == 8


def test_profile_file(processor, tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("Fish, fish; FISH. cat", encoding="utf-8")
    profile = processor.profile_file(str(path))
    assert dict(profile) == {"FISH": 0.75, "CAT": 0.25}


def test_profile_file_missing_raises(processor, tmp_path):
    with pytest.raises(OSError):
        processor.profile_file(str(tmp_path / "missing.txt"))


def test_profile_is_read_only_and_recovers_counts(processor):
    profile = processor.profile_text("fish fish cat the")
    with pytest.raises(TypeError):
        profile["FISH"] = 1.0
    assert profile.count("FISH") == 2
    assert profile.count("THE") == 0
    assert isinstance(profile, Profile)
