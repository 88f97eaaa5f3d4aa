"""ScenarioRunner — drives a TrafficLightSubject through a scenario's steps."""

from traffic_light.light.domain.monitor import TrafficLightMonitor
from traffic_light.light.domain.observer import TrafficObserver
from traffic_light.light.domain.reaction import ReactionSink
from traffic_light.light.domain.subject import TrafficLightSubject
from traffic_light.light.infrastructure.registry import create_observer
from traffic_light.scenario.domain.config import (
    AddStep,
    NotifyStep,
    ObserverName,
    RemoveStep,
    ScenarioConfig,
    SetColorStep,
    Step,
)
from traffic_light.scenario.domain.summary import ScenarioSummary


class ScenarioRunner:
    """Builds the declared observers and applies each step to a fresh subject.

    Observers are created once per run, so adding the same declared observer
    twice offers the same object to the subject twice.
    """

    def __init__(
        self,
        config: ScenarioConfig,
        sink: ReactionSink,
        monitor: TrafficLightMonitor,
    ) -> None:
        self._config = config
        self._sink = sink
        self._monitor = monitor

    def run(self) -> ScenarioSummary:
        """
        Execute every step in order and summarise the subject's final state.

        Raises:
            ObserverKindNotSupportedError: if a declared observer kind is unknown.
        """
        observers = self._build_observers()
        with TrafficLightSubject(monitor=self._monitor) as subject:
            for step in self._config.steps:
                _apply(step=step, subject=subject, observers=observers)
            return ScenarioSummary(
                name=self._config.name,
                steps_applied=len(self._config.steps),
                final_color=subject.get_color(),
                observer_ids=[o.observer_id for o in subject.observers],
            )

    def _build_observers(self) -> dict[ObserverName, TrafficObserver]:
        return {
            name: create_observer(kind=spec.kind, observer_id=spec.id, sink=self._sink)
            for name, spec in self._config.observers.items()
        }


def _apply(
    step: Step,
    subject: TrafficLightSubject,
    observers: dict[ObserverName, TrafficObserver],
) -> None:
    if isinstance(step, AddStep):
        subject.add_observer(observers[step.observer])
    elif isinstance(step, RemoveStep):
        subject.remove_observer(observers[step.observer])
    elif isinstance(step, SetColorStep):
        subject.set_color(step.color)
    elif isinstance(step, NotifyStep):
        subject.notify_observers()
