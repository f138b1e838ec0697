import functools
import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar, cast

from lazysupply import configuration, perf
from lazysupply.lazy_exception import InvalidArgumentException, ProducerFailureException

T = TypeVar('T')

logger = logging.getLogger(__name__)


class LazyCell(Generic[T]):
    """
    A value that is computed on the first call to get() and then shared by every caller.

    Pass a zero-argument producer, or subclass and override on_get(). The producer runs
    under a per-instance lock so concurrent callers wait for the one thread doing the work
    and then all receive the identical object. Once initialized, get() takes no lock.

    If the producer raises, get() raises ProducerFailureException (chained to the original
    error) and the cell stays uninitialized. With retry_on_failure the next get() calls the
    producer again; without it the cell keeps raising the first failure and never calls the
    producer again. retry_on_failure=None uses configuration.retry_failed_producer.
    """

    def __init__(self, producer: Callable[[], T] | None = None, retry_on_failure: bool | None = None) -> None:
        if producer is None and type(self).on_get is LazyCell.on_get:
            raise InvalidArgumentException(f'{type(self).__name__} needs a producer or an on_get() override')
        if producer is not None and not callable(producer):
            raise InvalidArgumentException(f'Expected a zero-argument callable for producer, got `{producer}` ({type(producer)})')
        self._producer = producer
        self._retry = configuration.retry_failed_producer.value if retry_on_failure is None else retry_on_failure
        self._lock = threading.Lock()
        self._failure: ProducerFailureException | None = None
        self._value: T | None = None
        # Written after _value and only ever False -> True. A reader that sees True sees the value.
        self._initialized = False

    def on_get(self) -> T:
        return cast(Callable[[], T], self._producer)()

    def get(self) -> T:
        if self._initialized:
            return cast(T, self._value)
        with self._lock:
            if not self._initialized:
                self._initialize()
        return cast(T, self._value)

    def __call__(self) -> T:
        return self.get()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _initialize(self) -> None:
        if self._failure is not None:
            # Each caller gets its own exception object, chained to the recorded cause.
            raise ProducerFailureException(*self._failure.args) from self._failure.__cause__
        start_time = perf.start()
        try:
            value = self.on_get()
        except Exception as e:
            failure = ProducerFailureException(f'Producer for {self!r} failed: {e!r}')
            logger.warning(f'Producer for {self!r} failed after {round(perf.took(start_time), 3)}s, {"will retry on next get()" if self._retry else "not retrying"}: {e!r}')
            if not self._retry:
                self._failure = failure
            raise failure from e
        self._value = value
        self._initialized = True
        logger.debug(f'Initialized {self!r} in {round(perf.took(start_time), 3)}s')
        perf.check(start_time, configuration.slow_producer.key, f'Slow producer for {self!r}', __name__)

    def __repr__(self) -> str:
        source = self._producer if self._producer is not None else f'{type(self).__name__}.on_get'
        state = 'initialized' if self._initialized else 'uninitialized'
        return f'{type(self).__name__}({source}, {state})'


def from_producer(producer: Callable[[], T]) -> LazyCell[T]:
    """Wrap producer in a LazyCell, or return it unchanged if it is one already."""
    if isinstance(producer, LazyCell):
        return producer
    return LazyCell(producer)

def lazy_property(fn: Callable[[], T]) -> LazyCell[T]:
    """Decorator that makes a zero-argument function evaluate once, on first call."""
    if isinstance(fn, LazyCell):
        return fn
    cell = LazyCell(fn)
    functools.update_wrapper(cell, fn)
    return cell
