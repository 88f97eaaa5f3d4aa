"""Error types raised by light infrastructure."""

from traffic_light.core.errors import TrafficLightError


class ObserverKindNotSupportedError(TrafficLightError):
    """Raised when an observer kind has no registered implementation."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Failed to create observer: unsupported kind '{kind}'")
