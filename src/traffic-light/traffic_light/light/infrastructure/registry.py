"""Observer registry — maps an observer kind to the concrete TrafficObserver."""

from traffic_light.light.domain.observer import TrafficObserver
from traffic_light.light.domain.participants import VehicleObserver, VendorObserver
from traffic_light.light.domain.reaction import ReactionSink
from traffic_light.light.infrastructure.errors import ObserverKindNotSupportedError

_OBSERVER_KINDS: dict[str, type[VehicleObserver] | type[VendorObserver]] = {
    "vehicle": VehicleObserver,
    "vendor": VendorObserver,
}

SUPPORTED_KINDS: tuple[str, ...] = tuple(_OBSERVER_KINDS)


def create_observer(kind: str, observer_id: int, sink: ReactionSink) -> TrafficObserver:
    """Return a new observer of the given kind.

    Raises:
        ObserverKindNotSupportedError: if kind is not a known observer kind.
    """
    observer_cls = _OBSERVER_KINDS.get(kind)
    if observer_cls is None:
        raise ObserverKindNotSupportedError(kind=kind)
    return observer_cls(observer_id=observer_id, sink=sink)
