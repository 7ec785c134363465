"""Step-gated form wizard.

A wizard is an ordered list of steps, each guarded by a :class:`StepRule`.
The user may always go back; going forward requires the current step's
required fields to be filled. Nothing here touches the database: the last
step's submit action lives with the caller (see ``registration``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

REQUIRED_FIELDS_NOTICE = "لطفاً تمام فیلدهای ضروری را تکمیل کنید"


def _is_positive(value: Any) -> bool:
    """Numbers and numeric strings above zero; form inputs often arrive as text."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class StepRule:
    """Required-field predicate for one wizard step."""

    text_fields: tuple[str, ...] = ()
    list_fields: tuple[str, ...] = ()
    positive_fields: tuple[str, ...] = ()
    true_fields: tuple[str, ...] = ()

    def missing(self, fields: Mapping[str, Any]) -> list[str]:
        missing: list[str] = []
        for name in self.text_fields:
            if not fields.get(name):
                missing.append(name)
        for name in self.list_fields:
            if not fields.get(name):
                missing.append(name)
        for name in self.positive_fields:
            if not _is_positive(fields.get(name)):
                missing.append(name)
        for name in self.true_fields:
            if fields.get(name) is not True:
                missing.append(name)
        return missing


@dataclass(frozen=True)
class WizardDefinition:
    name: str
    steps: tuple[StepRule, ...]

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def rule_for(self, step: int) -> StepRule:
        if not 1 <= step <= self.total_steps:
            raise ValueError(f"{self.name} has no step {step}")
        return self.steps[step - 1]


def missing_fields(definition: WizardDefinition, step: int, fields: Mapping[str, Any]) -> list[str]:
    """Names of required fields that block leaving ``step``."""
    return definition.rule_for(step).missing(fields)


def can_advance(definition: WizardDefinition, step: int, fields: Mapping[str, Any]) -> bool:
    return not missing_fields(definition, step, fields)


def first_incomplete_step(definition: WizardDefinition, fields: Mapping[str, Any]) -> int | None:
    """First step whose predicate fails, or None when the whole form is complete."""
    for step in range(1, definition.total_steps + 1):
        if not can_advance(definition, step, fields):
            return step
    return None


@dataclass(frozen=True)
class WizardState:
    """Current step plus the flat record of collected fields."""

    definition: WizardDefinition
    current_step: int = 1
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 1 <= self.current_step <= self.definition.total_steps:
            raise ValueError(f"step must be within 1..{self.definition.total_steps}")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def is_last_step(self) -> bool:
        return self.current_step == self.definition.total_steps

    def update(self, **values: Any) -> WizardState:
        return replace(self, fields={**self.fields, **values})

    def advance(self) -> tuple[WizardState, str | None]:
        """Move forward when the current step is complete.

        Returns the new state and a notice; on rejection the state is
        unchanged and the notice asks the user to fill required fields.
        """
        if not can_advance(self.definition, self.current_step, self.fields):
            return self, REQUIRED_FIELDS_NOTICE
        next_step = min(self.current_step + 1, self.definition.total_steps)
        return replace(self, current_step=next_step), None

    def prev_step(self) -> WizardState:
        return replace(self, current_step=max(self.current_step - 1, 1))
