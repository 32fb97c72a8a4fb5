"""Adapters turning partial string comparators into total distance oracles."""

import sys
from typing import Any, Callable


class TotalOracle:
    """Wrap a comparator that raises on some inputs so it always returns.

    Pairs the comparator cannot handle map to ``undefined`` (by default the
    largest machine-sized int, which no sensible bound window includes).
    A module-level class rather than a closure so instances pickle into
    worker processes.
    """

    def __init__(
        self,
        partial: Callable[[str, str], Any],
        undefined: Any = sys.maxsize,
        errors: tuple[type[BaseException], ...] = (ValueError,),
    ) -> None:
        self.partial = partial
        self.undefined = undefined
        self.errors = errors

    def __call__(self, a: str, b: str) -> Any:
        try:
            return self.partial(a, b)
        except self.errors:
            return self.undefined

    def __repr__(self) -> str:
        name = getattr(self.partial, "__name__", repr(self.partial))
        return f"TotalOracle({name}, undefined={self.undefined!r})"


def total_oracle(
    partial: Callable[[str, str], Any],
    undefined: Any = sys.maxsize,
    errors: tuple[type[BaseException], ...] = (ValueError,),
) -> TotalOracle:
    """Adapt ``partial`` into a total oracle returning ``undefined`` on ``errors``."""
    return TotalOracle(partial, undefined=undefined, errors=errors)
