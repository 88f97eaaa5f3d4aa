"""Structlog implementation of the TrafficLightMonitor port."""

import structlog

from traffic_light.light.domain.color import Color


class StructlogTrafficLightMonitor:
    """Delegates subject domain events to structlog.

    Satisfies the TrafficLightMonitor protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def observer_added(self, observer_id: int, total: int) -> None:
        self._log.debug("light.observer_added", observer_id=observer_id, total=total)

    def observer_duplicate_ignored(self, observer_id: int) -> None:
        self._log.info("light.observer_duplicate_ignored", observer_id=observer_id)

    def observer_removed(self, observer_id: int, removed: int, total: int) -> None:
        self._log.debug(
            "light.observer_removed",
            observer_id=observer_id,
            removed=removed,
            total=total,
        )

    def color_changed(self, color: Color, observer_count: int) -> None:
        self._log.info(
            "light.color_changed", color=color, observer_count=observer_count
        )

    def observers_cleared(self, count: int) -> None:
        self._log.debug("light.observers_cleared", count=count)
