"""TrafficObserver port — anything that reacts to a traffic light color change."""

from typing import Protocol

from traffic_light.light.domain.color import Color


class TrafficObserver(Protocol):
    """Observer registered with a TrafficLightSubject.

    ``observer_id`` is the identity used for deduplication and removal; two
    observers with the same id are treated as the same observer.
    """

    observer_id: int

    def on_color_change(self, color: Color) -> None: ...
