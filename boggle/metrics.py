import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class SearchStats:
    """Counters and per-stage timings for searches over one board."""

    def __init__(self):
        self.nodes = 0
        self.pruned = 0
        self.words = 0
        self.timings: dict[str, float] = {}

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        nodes, pruned, words = self.nodes, self.pruned, self.words
        try:
            yield self
        finally:
            elapsed = round((time.perf_counter() - t0) * 1000, 1)  # ms
            self.timings[name] = self.timings.get(name, 0.0) + elapsed
            logger.info(
                "search=%s nodes=%d pruned=%d words=%d elapsed=%.1fms",
                name, self.nodes - nodes, self.pruned - pruned, self.words - words, elapsed,
            )

    @property
    def total_ms(self) -> float:
        return round(sum(self.timings.values()), 1)

    def summary(self) -> dict:
        return {
            "nodes": self.nodes,
            "pruned": self.pruned,
            "words": self.words,
            "timings": {**self.timings, "total": self.total_ms},
        }
