from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationFailure:
    property_name: str
    error_message: str


@dataclass
class ValidationResult:
    """Collected rule violations for one command, in rule order."""

    errors: List[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, property_name: str, error_message: str) -> None:
        self.errors.append(ValidationFailure(property_name, error_message))

    def messages(self) -> list[str]:
        return [e.error_message for e in self.errors]


Rule = Callable[[T], Optional[ValidationFailure]]


class CommandValidator(Generic[T]):
    """Runs every rule against a command and collects all failures.

    Subclasses return their rules from rules(); each rule returns a
    ValidationFailure or None. Business violations never raise.
    """

    def rules(self) -> Iterable[Rule[T]]:
        raise NotImplementedError

    def validate(self, command: T) -> ValidationResult:
        result = ValidationResult()
        for rule in self.rules():
            failure = rule(command)
            if failure is not None:
                result.errors.append(failure)
        return result
