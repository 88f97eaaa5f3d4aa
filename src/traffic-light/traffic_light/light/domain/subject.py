"""TrafficLightSubject — holds the light color and notifies registered observers."""

from types import TracebackType

from traffic_light.light.domain.color import Color
from traffic_light.light.domain.monitor import TrafficLightMonitor
from traffic_light.light.domain.observer import TrafficObserver


class TrafficLightSubject:
    """Owns the current color and an ordered collection of observers.

    Assigning a color (via ``set_color`` or the ``color`` property) notifies
    every registered observer synchronously, in registration order, even when
    the color is unchanged. Observers are keyed by ``observer_id``: adding an
    observer whose id is already registered is a no-op, and removal drops every
    observer sharing the given id. None of these operations raise.

    Use as a context manager, or call ``close()``, to release the observers.
    """

    def __init__(self, monitor: TrafficLightMonitor) -> None:
        self._monitor = monitor
        self._color: Color = ""
        self._observers: list[TrafficObserver] = []

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, new_color: Color) -> None:
        self.set_color(new_color)

    @property
    def observers(self) -> tuple[TrafficObserver, ...]:
        return tuple(self._observers)

    def get_color(self) -> Color:
        return self._color

    def set_color(self, new_color: Color) -> None:
        self._color = new_color
        self._monitor.color_changed(
            color=new_color, observer_count=len(self._observers)
        )
        self.notify_observers()

    def add_observer(self, observer: TrafficObserver) -> None:
        if any(o.observer_id == observer.observer_id for o in self._observers):
            self._monitor.observer_duplicate_ignored(observer_id=observer.observer_id)
            return
        self._observers.append(observer)
        self._monitor.observer_added(
            observer_id=observer.observer_id, total=len(self._observers)
        )

    def remove_observer(self, observer: TrafficObserver) -> None:
        before = len(self._observers)
        self._observers = [
            o for o in self._observers if o.observer_id != observer.observer_id
        ]
        self._monitor.observer_removed(
            observer_id=observer.observer_id,
            removed=before - len(self._observers),
            total=len(self._observers),
        )

    def notify_observers(self) -> None:
        # Observers may mutate the subject while being notified.
        color = self._color
        for observer in list(self._observers):
            observer.on_color_change(color)

    def close(self) -> None:
        count = len(self._observers)
        self._observers.clear()
        self._monitor.observers_cleared(count=count)

    def __enter__(self) -> "TrafficLightSubject":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
