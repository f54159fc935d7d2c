"""Outcomes of property evaluations and the arguments that produced them."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Optional

if TYPE_CHECKING:
    from proptest.gen_parameters import GenParameters
    from proptest.gen_result import GenResult


class PropStatus(Enum):
    """Outcome of a single property evaluation."""

    PROOF = 0
    TRUE = 1
    FALSE = 2
    UNDECIDED = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name


@dataclass
class PropArg:
    """A value a property was evaluated with, used for reporting."""

    arg: Any
    arg_formatted: str
    orig_arg: Any
    orig_arg_formatted: str
    label: str
    shrinks: int

    def __str__(self) -> str:
        return f"{self.arg}"


@dataclass
class PropResult:
    """The result of evaluating a property once."""

    status: PropStatus
    error: Optional[BaseException] = None
    error_stack: Optional[str] = None
    args: List[PropArg] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def success(self) -> bool:
        return self.status in (PropStatus.TRUE, PropStatus.PROOF)

    def with_args(self, args: List[PropArg]) -> "PropResult":
        self.args = args
        return self

    def add_args(self, *args: PropArg) -> "PropResult":
        self.args = [*self.args, *args]
        return self

    def and_(self, other: "PropResult") -> "PropResult":
        """Combine two results; true only if both are true."""
        for status in (PropStatus.ERROR, PropStatus.FALSE, PropStatus.UNDECIDED):
            if self.status is status:
                return self
            if other.status is status:
                return other
        if self.status is PropStatus.PROOF:
            return self._merge_with(other, other.status)
        if other.status is PropStatus.PROOF:
            return self._merge_with(other, self.status)
        if self.status is PropStatus.TRUE and other.status is PropStatus.TRUE:
            return self._merge_with(other, PropStatus.TRUE)
        return self

    def _merge_with(self, other: "PropResult", status: PropStatus) -> "PropResult":
        return PropResult(
            status=status,
            args=[*self.args, *other.args],
            labels=[*self.labels, *other.labels],
        )


Prop = Callable[["GenParameters"], PropResult]


def new_prop_result(success: bool, label: str) -> PropResult:
    """A true or false result carrying one label."""
    return PropResult(
        status=PropStatus.TRUE if success else PropStatus.FALSE,
        labels=[label],
        args=[],
    )


def new_prop_arg(
    gen_result: "GenResult",
    shrinks: int,
    value: Any,
    value_formatted: str,
    orig_value: Any,
    orig_value_formatted: str,
) -> PropArg:
    """Describe an argument, labelled with the generator's labels."""
    return PropArg(
        arg=value,
        arg_formatted=value_formatted,
        orig_arg=orig_value,
        orig_arg_formatted=orig_value_formatted,
        label=", ".join(gen_result.labels),
        shrinks=shrinks,
    )


def save_prop(prop: Prop) -> Prop:
    """Wrap a property so that any exception it raises becomes an error result."""

    def safe(gen_params: "GenParameters") -> PropResult:
        try:
            return prop(gen_params)
        except Exception as exc:
            error = RuntimeError(f"Check paniced: {exc}")
            error.__cause__ = exc
            return PropResult(
                status=PropStatus.ERROR,
                error=error,
                error_stack=traceback.format_exc(),
            )

    return safe