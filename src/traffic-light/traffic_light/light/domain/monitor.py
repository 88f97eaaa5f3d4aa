"""Monitor port for subject domain events — defines events in domain language."""

from typing import Protocol

from traffic_light.light.domain.color import Color


class TrafficLightMonitor(Protocol):
    def observer_added(self, observer_id: int, total: int) -> None: ...

    def observer_duplicate_ignored(self, observer_id: int) -> None: ...

    def observer_removed(self, observer_id: int, removed: int, total: int) -> None: ...

    def color_changed(self, color: Color, observer_count: int) -> None: ...

    def observers_cleared(self, count: int) -> None: ...
