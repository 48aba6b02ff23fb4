"""Domain models for Task List."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class InvalidPriority(ValueError):
    """Raised when a priority level is outside LOW..HIGH."""


class Priority(IntEnum):
    """Priority level for a task. Higher values are listed first."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @classmethod
    def _missing_(cls, value):
        valid = ", ".join(str(p.value) for p in cls)
        raise InvalidPriority(f"Invalid priority level {value!r}. Must be one of: {valid}")

    @classmethod
    def lowest(cls) -> Priority:
        return cls.LOW

    @property
    def level(self) -> int:
        return int(self)

    def is_max(self) -> bool:
        return self is Priority.HIGH

    def is_min(self) -> bool:
        return self is Priority.LOW

    def up(self) -> Priority:
        """Return the next level up, saturating at HIGH."""
        if self.is_max():
            return self
        return Priority(self.level + 1)

    def down(self) -> Priority:
        """Return the next level down, saturating at LOW."""
        if self.is_min():
            return self
        return Priority(self.level - 1)


class Task(BaseModel):
    """A task. The id is assigned once by the factory and never changes."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(frozen=True)
    text: str
    priority: Priority = Field(default_factory=Priority.lowest)
