"""Error types raised by scenario infrastructure."""

from pathlib import Path

from traffic_light.core.errors import TrafficLightError


class ScenarioValidationError(TrafficLightError):
    """Raised when the loaded scenario fails semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate scenario: {reason}")


class ScenarioLoadError(TrafficLightError):
    """Raised when the scenario file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load scenario: {reason}: {path}")
