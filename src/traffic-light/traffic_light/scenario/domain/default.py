"""The built-in demonstration scenario."""

from traffic_light.light.domain.color import TrafficColors
from traffic_light.scenario.domain.config import (
    AddStep,
    ObserverSpec,
    RemoveStep,
    ScenarioConfig,
    SetColorStep,
)


def default_scenario() -> ScenarioConfig:
    """Vehicle 1 and vendor 2 watch the light turn red, then the vendor leaves
    and the light turns green."""
    return ScenarioConfig(
        name="intersection-demo",
        version="1",
        observers={
            "vehicle": ObserverSpec(kind="vehicle", id=1),
            "vendor": ObserverSpec(kind="vendor", id=2),
        },
        steps=[
            AddStep(action="add", observer="vehicle"),
            AddStep(action="add", observer="vendor"),
            SetColorStep(action="set_color", color=TrafficColors.RED),
            RemoveStep(action="remove", observer="vendor"),
            SetColorStep(action="set_color", color=TrafficColors.GREEN),
        ],
    )
