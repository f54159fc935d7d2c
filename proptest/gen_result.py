"""The result of running a generator once."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from proptest.shrink import Shrinker, no_shrinker


@dataclass
class GenResult:
    """A generated value together with its shrinker, type, labels and sieve."""

    result: Any
    shrinker: Shrinker
    result_type: Optional[type]
    labels: List[str] = field(default_factory=list)
    sieve: Optional[Callable[[Any], bool]] = None

    def retrieve(self) -> Tuple[Any, bool]:
        """Return ``(value, True)`` if a valid value exists, else ``(None, False)``."""
        if (self.sieve is None and self.result is not None) or (
            self.sieve is not None and self.sieve(self.result)
        ):
            return self.result, True
        return None, False

    def retrieve_as_value(self) -> Tuple[Any, bool]:
        """Return the value to pass to a check; an accepted empty result gives ``None``."""
        if self.result is not None and (self.sieve is None or self.sieve(self.result)):
            return self.result, True
        if self.result is None and self.sieve is not None and self.sieve(None):
            return None, True
        return None, False


def new_gen_result(result: Any, shrinker: Shrinker) -> GenResult:
    """Create a result for a concrete (non-``None``) value."""
    return GenResult(result=result, shrinker=shrinker, result_type=type(result))


def new_empty_result(result_type: Optional[type]) -> GenResult:
    """Create an empty result, invalid unless a sieve explicitly accepts it."""
    return GenResult(result=None, shrinker=no_shrinker, result_type=result_type)