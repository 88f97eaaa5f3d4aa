"""Concrete traffic observers: a vehicle on the road and a roadside vendor."""

from traffic_light.light.domain.color import Color, TrafficColors
from traffic_light.light.domain.reaction import ReactionSink


class VehicleObserver:
    """Stops on red, starts on green, slows down on anything else.

    Satisfies the TrafficObserver protocol structurally.
    """

    role = "Traveller"

    def __init__(self, observer_id: int, sink: ReactionSink) -> None:
        self.observer_id = observer_id
        self._sink = sink

    def on_color_change(self, color: Color) -> None:
        if color == TrafficColors.RED:
            message = "stop vehicle"
        elif color == TrafficColors.GREEN:
            message = "start vehicle"
        else:
            message = "slow down vehicle"
        self._sink.reaction(
            role=self.role, observer_id=self.observer_id, color=color, message=message
        )

    def __repr__(self) -> str:
        return f"VehicleObserver(observer_id={self.observer_id})"


class VendorObserver:
    """Sells while traffic is stopped and steps aside while it moves.

    Satisfies the TrafficObserver protocol structurally.
    """

    role = "Vendor"

    def __init__(self, observer_id: int, sink: ReactionSink) -> None:
        self.observer_id = observer_id
        self._sink = sink

    def on_color_change(self, color: Color) -> None:
        if color == TrafficColors.RED:
            message = "Start selling products"
        elif color == TrafficColors.GREEN:
            message = "Move aside and wait for red signal"
        else:
            message = "Do nothing"
        self._sink.reaction(
            role=self.role, observer_id=self.observer_id, color=color, message=message
        )

    def __repr__(self) -> str:
        return f"VendorObserver(observer_id={self.observer_id})"
