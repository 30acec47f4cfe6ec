# app/common/metrics.py

import logging
import threading
import time as _time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class TimerMetadata:
    name: str
    display_name: str = ""
    description: str = ""
    unit: str = "seconds"

@dataclass
class TimerStats:
    count: int = 0
    total: float = 0.0
    min: Optional[float] = None
    max: Optional[float] = None

class MetricsRegistry:
    """
    In-process store for named timers.
    Every call to time() records exactly one sample, whether the wrapped
    block returns or raises. Recording never raises into the caller.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._metadata: Dict[str, TimerMetadata] = {}
        self._stats: Dict[str, TimerStats] = {}

    def register_timer(self, metadata: TimerMetadata) -> TimerMetadata:
        with self._lock:
            existing = self._metadata.get(metadata.name)
            if existing is not None:
                return existing
            self._metadata[metadata.name] = metadata
            self._stats[metadata.name] = TimerStats()
            return metadata

    def record(self, name: str, seconds: float):
        with self._lock:
            if name not in self._metadata:
                self._metadata[name] = TimerMetadata(name=name)
            stats = self._stats.setdefault(name, TimerStats())
            stats.count += 1
            stats.total += seconds
            stats.min = seconds if stats.min is None else min(stats.min, seconds)
            stats.max = seconds if stats.max is None else max(stats.max, seconds)

    @contextmanager
    def time(self, metadata: TimerMetadata) -> Iterator[None]:
        # The response must not depend on the metrics sink
        try:
            self.register_timer(metadata)
        except Exception:
            logger.exception("Failed to register timer %s", metadata.name)

        start = _time.perf_counter()
        try:
            yield
        finally:
            elapsed = _time.perf_counter() - start
            try:
                self.record(metadata.name, elapsed)
            except Exception:
                logger.exception("Failed to record timer %s", metadata.name)

    def snapshot(self) -> Dict[str, TimerStats]:
        with self._lock:
            return {
                name: TimerStats(s.count, s.total, s.min, s.max)
                for name, s in self._stats.items()
            }

    def reset(self):
        with self._lock:
            self._metadata.clear()
            self._stats.clear()

    def export_prometheus(self) -> str:
        lines = []
        with self._lock:
            for name in sorted(self._stats):
                meta = self._metadata[name]
                stats = self._stats[name]
                base = f"application_{name}_{meta.unit}"
                help_text = _help_text(meta)

                lines.append(f"# HELP {base} {help_text}")
                lines.append(f"# TYPE {base} summary")
                lines.append(f"{base}_count {stats.count}")
                lines.append(f"{base}_sum {stats.total}")

                for label, value in (("max", stats.max), ("min", stats.min)):
                    gauge = f"application_{name}_{label}_{meta.unit}"
                    lines.append(f"# HELP {gauge} {help_text} ({label})")
                    lines.append(f"# TYPE {gauge} gauge")
                    lines.append(f"{gauge} {value or 0.0}")

        return "\n".join(lines) + "\n" if lines else ""

def _help_text(meta: TimerMetadata) -> str:
    # "Call duration: Time spent in call"
    parts = [p for p in (meta.display_name, meta.description) if p]
    return ": ".join(parts) if parts else meta.name

# Process-wide collector
metrics = MetricsRegistry()
