"""Structlog implementation of the ScenarioObserver port."""

import structlog


class StructlogScenarioObserver:
    """Delegates scenario domain events to structlog.

    Satisfies the ScenarioObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_loaded(self, name: str, version: str) -> None:
        self._log.info("scenario.loaded", name=name, version=version)

    def scenario_unknown_color_warning(self, color: str, step_index: int) -> None:
        self._log.warning(
            "scenario.unknown_color_warning",
            color=color,
            step_index=step_index,
            message="Color is not red, green or yellow; observers will use their default reaction",
        )
