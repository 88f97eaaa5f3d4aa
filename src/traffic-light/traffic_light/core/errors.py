"""Base exception class for all traffic-light-specific errors."""


class TrafficLightError(Exception):
    """Base class for all traffic-light errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
