import logging

from lexsim.corpus import StandardCorpus
from lexsim.performance_monitoring import Profiler
from lexsim.similarity import ScorerFactory


def test_timer_records_stage_durations():
    profiler = Profiler()
    with profiler.timer("Stage"):
        pass
    assert "Stage" in profiler.timings
    assert profiler.timings["Stage"] >= 0.0


def test_corpus_building_is_timed(write_documents):
    profiler = Profiler()
    docs = write_documents({"a.txt": "ant"})
    StandardCorpus(profiler=profiler).build_from_directory(str(docs))
    assert "Corpus Building" in profiler.timings


def test_generate_report_writes_file(tmp_path):
    profiler = Profiler()
    profiler.start_global_timer()
    with profiler.timer("Scoring"):
        pass
    report_file = tmp_path / "performance.log"

    report = profiler.generate_report(doc_count=3, pair_count=3, filename=str(report_file))

    assert "=== Timing Breakdown ===" in report
    assert "Scoring:" in report
    assert "Pairs scored: 3" in report
    assert report_file.read_text(encoding="utf-8") == report


def test_log_message_forwards_to_logger(caplog):
    profiler = Profiler()
    with caplog.at_level(logging.INFO, logger="lexsim.performance_monitoring"):
        profiler.log_message("corpus ready")
    assert "corpus ready" in caplog.text


def test_factory_reports_auto_selection_through_profiler(caplog):
    profiler = Profiler()
    with caplog.at_level(logging.INFO, logger="lexsim.performance_monitoring"):
        ScorerFactory.create_scorer('auto', profiler, doc_count=2, sparse_threshold=100)
    assert "Auto-selected scorer mode: standard" in caplog.text
