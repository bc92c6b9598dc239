import time
from contextlib import contextmanager
from typing import Dict, Iterator


class StageTimer:
    """Wall-clock seconds per named pipeline stage (count / order / write)."""

    def __init__(self) -> None:
        self.seconds: Dict[str, float] = {}  # insertion order = first entry of each stage

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.seconds[name] = self.seconds.get(name, 0.0) + (time.perf_counter() - t0)

    def get(self, name: str, default: float = 0.0) -> float:
        return float(self.seconds.get(name, default))

    def total(self) -> float:
        return float(sum(self.seconds.values()))

    def as_dict(self) -> Dict[str, float]:
        return dict(self.seconds)
