"""
Lazy, restartable number pipelines.

A Range is an immutable description of a source plus a tuple of stage
descriptors. Nothing runs until the Range is iterated, and every iteration
builds its own cursor, so one Range can be drained any number of times.
"""

from functools import reduce as builtin_reduce
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

_MISSING = object()


def _check_count(name: str, n: Any) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name}() count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name}() count must be >= 0, got {n}")
    return n


def _check_callable(name: str, fn: Any) -> Callable:
    if not callable(fn):
        raise TypeError(f"{name}() expects a callable, got {type(fn).__name__}")
    return fn


def _from_generator(seed_generator: Callable[[], Any]) -> Iterator[Any]:
    while True:
        yield seed_generator()


def _skip(gen: Iterator[Any], k: int) -> Iterator[Any]:
    skipped = 0
    for x in gen:
        if skipped < k:
            skipped += 1
            continue
        yield x


def _limit(gen: Iterator[Any], n: int) -> Iterator[Any]:
    # Stop right after the n-th item so the upstream is never pulled again.
    if n == 0:
        return
    taken = 0
    for x in gen:
        yield x
        taken += 1
        if taken >= n:
            return


def _batch(gen: Iterator[Any], size: int) -> Iterator[Tuple[Any, ...]]:
    bucket = []
    for x in gen:
        bucket.append(x)
        if len(bucket) == size:
            yield tuple(bucket)
            bucket = []
    if bucket:
        yield tuple(bucket)


class Range:
    """
    A chainable, lazy sequence. Stages are stored and applied only when you
    iterate.

    Sources come in three kinds:
      - ``Range.from_(fn)``: an endless sequence of ``fn()`` calls
      - ``Range.from_factory(factory)``: like ``from_`` but ``factory()`` makes a
        fresh generator for every cursor
      - ``Range(iterable)`` / ``Range.from_iterable(iterable)``
    """

    def __init__(self, source: Iterable[Any] = (), ops: Tuple[Tuple[str, Any], ...] = (),
                 kind: str = "iterable"):
        self._source = source
        self._ops = tuple(ops)         # sequence of ("op_name", callable/arg)
        self._kind = kind

    # --------- sources ----------
    @classmethod
    def from_(cls, seed_generator: Callable[[], Any]) -> "Range":
        """Wrap a zero-argument callable; each element is one call to it."""
        return cls(_check_callable("from_", seed_generator), kind="generator")

    @classmethod
    def from_factory(cls, factory: Callable[[], Callable[[], Any]]) -> "Range":
        """Wrap a factory that returns a fresh seed generator per iteration."""
        return cls(_check_callable("from_factory", factory), kind="factory")

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> "Range":
        iter(iterable)  # fail now on non-iterables, not on first use
        return cls(iterable)

    # --------- chainable operators (lazy) ----------
    def map(self, fn: Callable[[Any], Any]) -> "Range":
        return self._with_op(("map", _check_callable("map", fn)))

    def filter(self, pred: Callable[[Any], bool]) -> "Range":
        return self._with_op(("filter", _check_callable("filter", pred)))

    def skip(self, n: int) -> "Range":
        return self._with_op(("skip", _check_count("skip", n)))

    def limit(self, n: int) -> "Range":
        """Yield at most ``n`` elements, even from an endless upstream."""
        return self._with_op(("limit", _check_count("limit", n)))

    def batch(self, size: int) -> "Range":
        size = _check_count("batch", size)
        if size == 0:
            raise ValueError("batch() size must be >= 1")
        return self._with_op(("batch", size))

    def chunk(self, size: int) -> "Range":
        """Alias for batch() - groups elements into chunks of specified size"""
        return self.batch(size)

    # --------- forcing evaluation ----------
    def materialize(self) -> List[Any]:
        """Drain a fresh cursor into a list, preserving yield order."""
        return list(self)

    def to_list(self) -> List[Any]:
        return self.materialize()

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """Apply a function of two arguments cumulatively to items, from left to right"""
        if initial is not _MISSING:
            return builtin_reduce(fn, self, initial)
        return builtin_reduce(fn, self)

    def sum(self, start: Any = 0) -> Any:
        total = start
        for item in self:
            total += item
        return total

    def count(self) -> int:
        count = 0
        for _ in self:
            count += 1
        return count

    def first(self, default: Optional[Any] = None) -> Any:
        """Return the first element, or default if empty"""
        for item in self:
            return item
        return default

    # --------- iterator protocol ----------
    def __iter__(self) -> Iterator[Any]:
        it = self._cursor_source()
        for op, arg in self._ops:
            if op == "map":
                it = map(arg, it)
            elif op == "filter":
                it = filter(arg, it)
            elif op == "skip":
                it = _skip(it, arg)
            elif op == "limit":
                it = _limit(it, arg)
            elif op == "batch":
                it = _batch(it, arg)
            else:
                raise ValueError(f"Unknown op: {op}")
        return it

    def __repr__(self) -> str:
        stages = "".join(f".{op}(...)" for op, _ in self._ops)
        return f"Range<{self._kind}>{stages}"

    # --------- helpers ----------
    def _cursor_source(self) -> Iterator[Any]:
        if self._kind == "generator":
            return _from_generator(self._source)
        if self._kind == "factory":
            return _from_generator(_check_callable("from_factory", self._source()))
        return iter(self._source)

    def _with_op(self, op_tuple: Tuple[str, Any]) -> "Range":
        return Range(self._source, self._ops + (op_tuple,), self._kind)
