"""Observer port for the scenario domain — defines events in domain language."""

from typing import Protocol


class ScenarioObserver(Protocol):
    def scenario_loaded(self, name: str, version: str) -> None: ...

    def scenario_unknown_color_warning(self, color: str, step_index: int) -> None: ...
