import logging
import time
from io import StringIO

logger = logging.getLogger(__name__)


class Profiler:
    def __init__(self):
        self.timings = {}
        self.start_time = None

    def timer(self, task_name):
        """Returns a context manager to time a code block."""
        return Timer(task_name, self)

    def log_message(self, message, level=logging.INFO):
        """Forwards a message to the module logger."""
        logger.log(level, message)

    def start_global_timer(self):
        """Starts the global execution timer."""
        self.start_time = time.perf_counter()

    def get_global_time(self):
        if self.start_time is None:
            return 0.0
        return time.perf_counter() - self.start_time

    def generate_report(self, doc_count: int, pair_count: int, filename: str = None) -> str:
        """Returns formatted performance report as string and optionally writes to a file"""
        report = StringIO()

        report.write("=== Timing Breakdown ===\n")
        for task, duration in self.timings.items():
            report.write(f"{task}: {duration:.4f}s\n")

        tracked_total = sum(self.timings.values())
        report.write(f"\nTracked Operations Total: {tracked_total:.4f}s\n")
        report.write(f"Documents: {doc_count:,}  Pairs scored: {pair_count:,}\n")
        if self.start_time is not None:
            report.write(f"Wall Clock Total: {self.get_global_time():.4f}s\n")

        report_content = report.getvalue()

        if filename:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(report_content)

        return report_content


class Timer:
    def __init__(self, task_name, profiler):
        self.task_name = task_name
        self.profiler = profiler

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = time.perf_counter() - self.start
        self.profiler.timings[self.task_name] = elapsed
        logger.debug(f"{self.task_name} took {elapsed:.4f} seconds")
