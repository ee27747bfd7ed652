"""
Wall-clock timing of a fit.

The engine bindings split a solve into 'setup' and 'optimization'
sections; fit() times the warm-start Hessian on its own. All figures are
seconds from time.perf_counter.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total elapsed time plus named sections.

    A section entered twice accumulates. result() returns
    {'total_seconds': ..., <section>: ...} and is only available after
    stop().
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started = time.perf_counter()

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - begin
            )

    def result(self) -> dict[str, float]:
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """Timer started on entry and stopped on exit."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
