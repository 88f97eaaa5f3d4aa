"""Scenario configuration models — observers plus an ordered list of steps."""

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field, field_validator

ObserverName: TypeAlias = str


class ObserverSpec(BaseModel, frozen=True):
    kind: str = Field(min_length=1)
    id: int


class AddStep(BaseModel, frozen=True):
    """Register a declared observer with the subject."""

    action: Literal["add"]
    observer: str = Field(min_length=1)


class RemoveStep(BaseModel, frozen=True):
    """Remove every registered observer sharing the declared observer's id."""

    action: Literal["remove"]
    observer: str = Field(min_length=1)


class SetColorStep(BaseModel, frozen=True):
    """Assign a color; any string is accepted.

    Unquoted YAML scalars are turned back into text: ``color: 1`` becomes
    ``"1"``, and YAML booleans (``on``, ``yes``, ``off`` ...) become
    ``"true"`` or ``"false"``. Quote the value to keep its exact spelling.
    """

    action: Literal["set_color"]
    color: str

    @field_validator("color", mode="before")
    @classmethod
    def coerce_scalar_color(cls, value: object) -> object:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class NotifyStep(BaseModel, frozen=True):
    """Re-notify every observer with the current color."""

    action: Literal["notify"]


# Pydantic selects the step subtype from the `action` field.
Step: TypeAlias = Annotated[
    AddStep | RemoveStep | SetColorStep | NotifyStep,
    Field(discriminator="action"),
]


class ScenarioConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a traffic light scenario."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    observers: dict[ObserverName, ObserverSpec]
    steps: list[Step] = Field(min_length=1)
