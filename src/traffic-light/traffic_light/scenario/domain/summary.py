"""ScenarioSummary — what a subject looked like after a scenario ran."""

from pydantic import BaseModel


class ScenarioSummary(BaseModel, frozen=True):
    name: str
    steps_applied: int
    final_color: str
    observer_ids: list[int]
