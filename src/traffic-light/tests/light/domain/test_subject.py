"""Tests for TrafficLightSubject registration and notification."""

from tests.light.fake_monitor import FakeTrafficLightMonitor
from tests.light.fake_sink import FakeReactionSink
from traffic_light.light.domain.color import TrafficColors
from traffic_light.light.domain.participants import VehicleObserver, VendorObserver
from traffic_light.light.domain.subject import TrafficLightSubject


class RecordingObserver:
    """Minimal TrafficObserver that records every color it receives."""

    def __init__(self, observer_id: int, log: list[tuple[int, str]]) -> None:
        self.observer_id = observer_id
        self._log = log

    def on_color_change(self, color: str) -> None:
        self._log.append((self.observer_id, color))


def _make_subject() -> tuple[TrafficLightSubject, FakeTrafficLightMonitor]:
    monitor = FakeTrafficLightMonitor()
    return TrafficLightSubject(monitor=monitor), monitor


class TestColor:
    """The subject holds one color, empty until first assigned."""

    def test_initial_color_is_empty(self) -> None:
        subject, _ = _make_subject()
        assert subject.get_color() == ""
        assert subject.color == ""

    def test_set_color_updates_color(self) -> None:
        subject, _ = _make_subject()
        subject.set_color(TrafficColors.YELLOW)
        assert subject.get_color() == "yellow"

    def test_property_setter_notifies(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=1, log=log))

        subject.color = TrafficColors.RED

        assert subject.color == "red"
        assert log == [(1, "red")]

    def test_any_string_is_accepted(self) -> None:
        subject, _ = _make_subject()
        subject.set_color("purple")
        assert subject.get_color() == "purple"


class TestAddObserver:
    """Each identity appears in the collection at most once."""

    def test_add_preserves_insertion_order(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        for observer_id in (3, 1, 2):
            subject.add_observer(RecordingObserver(observer_id=observer_id, log=log))

        assert [o.observer_id for o in subject.observers] == [3, 1, 2]

    def test_duplicate_identity_is_ignored(self) -> None:
        subject, monitor = _make_subject()
        log: list[tuple[int, str]] = []
        first = RecordingObserver(observer_id=1, log=log)
        subject.add_observer(first)
        subject.add_observer(first)
        subject.add_observer(RecordingObserver(observer_id=1, log=log))

        assert len(subject.observers) == 1
        assert subject.observers[0] is first
        assert monitor.duplicates_ignored == [1, 1]

    def test_duplicate_reacts_once_per_set_color(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        observer = RecordingObserver(observer_id=1, log=log)
        subject.add_observer(observer)
        subject.add_observer(observer)

        subject.set_color(TrafficColors.GREEN)

        assert log == [(1, "green")]

    def test_many_offers_keep_distinct_identities(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        for observer_id in [1, 2, 1, 3, 2, 2, 4, 1]:
            subject.add_observer(RecordingObserver(observer_id=observer_id, log=log))

        ids = [o.observer_id for o in subject.observers]
        assert ids == [1, 2, 3, 4]
        assert len(ids) == len(set(ids))

    def test_added_event_reports_total(self) -> None:
        subject, monitor = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=1, log=log))
        subject.add_observer(RecordingObserver(observer_id=2, log=log))

        assert [(e.observer_id, e.total) for e in monitor.added] == [(1, 1), (2, 2)]


class TestNotify:
    """set_color notifies each observer exactly once, in registration order."""

    def test_every_observer_receives_the_assigned_color_in_order(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        for observer_id in (10, 20, 30):
            subject.add_observer(RecordingObserver(observer_id=observer_id, log=log))

        subject.set_color("red")

        assert log == [(10, "red"), (20, "red"), (30, "red")]

    def test_same_color_twice_notifies_twice(self) -> None:
        subject, monitor = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=1, log=log))

        subject.set_color(TrafficColors.RED)
        subject.set_color(TrafficColors.RED)

        assert log == [(1, "red"), (1, "red")]
        assert [e.color for e in monitor.color_changes] == ["red", "red"]

    def test_set_color_without_observers(self) -> None:
        subject, monitor = _make_subject()
        subject.set_color(TrafficColors.GREEN)
        assert monitor.color_changes[0].observer_count == 0

    def test_notify_observers_uses_current_color(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        subject.set_color(TrafficColors.YELLOW)
        subject.add_observer(RecordingObserver(observer_id=1, log=log))

        subject.notify_observers()

        assert log == [(1, "yellow")]


class TestRemoveObserver:
    """Removal is by identity and never fails."""

    def test_removed_observer_is_not_notified(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        first = RecordingObserver(observer_id=1, log=log)
        second = RecordingObserver(observer_id=2, log=log)
        subject.add_observer(first)
        subject.add_observer(second)

        subject.remove_observer(second)
        subject.set_color(TrafficColors.GREEN)

        assert log == [(1, "green")]

    def test_removal_matches_identity_not_object(self) -> None:
        subject, _ = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=2, log=log))

        subject.remove_observer(RecordingObserver(observer_id=2, log=log))

        assert subject.observers == ()

    def test_removing_unknown_identity_is_noop(self) -> None:
        subject, monitor = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=1, log=log))

        subject.remove_observer(RecordingObserver(observer_id=99, log=log))
        subject.set_color(TrafficColors.RED)

        assert [o.observer_id for o in subject.observers] == [1]
        assert log == [(1, "red")]
        assert monitor.removed[0].removed == 0

    def test_remove_from_empty_subject(self) -> None:
        subject, _ = _make_subject()
        subject.remove_observer(RecordingObserver(observer_id=1, log=[]))
        assert subject.observers == ()


class TestTeardown:
    """close() and context-manager exit release every observer."""

    def test_close_clears_observers(self) -> None:
        subject, monitor = _make_subject()
        log: list[tuple[int, str]] = []
        subject.add_observer(RecordingObserver(observer_id=1, log=log))
        subject.add_observer(RecordingObserver(observer_id=2, log=log))

        subject.close()

        assert subject.observers == ()
        assert monitor.cleared == [2]

    def test_context_manager_closes_on_exit(self) -> None:
        monitor = FakeTrafficLightMonitor()
        with TrafficLightSubject(monitor=monitor) as subject:
            subject.add_observer(RecordingObserver(observer_id=1, log=[]))

        assert subject.observers == ()
        assert monitor.cleared == [1]


class TestIntersectionScenarios:
    """End-to-end behaviour with the concrete vehicle and vendor observers."""

    def test_red_with_vehicle_and_vendor(self) -> None:
        subject, _ = _make_subject()
        sink = FakeReactionSink()
        subject.add_observer(VehicleObserver(observer_id=1, sink=sink))
        subject.add_observer(VendorObserver(observer_id=2, sink=sink))

        subject.set_color(TrafficColors.RED)

        assert sink.lines == [
            "Traveller: stop vehicle",
            "Vendor: Start selling products",
        ]

    def test_green_after_vendor_removed(self) -> None:
        subject, _ = _make_subject()
        sink = FakeReactionSink()
        vendor = VendorObserver(observer_id=2, sink=sink)
        subject.add_observer(VehicleObserver(observer_id=1, sink=sink))
        subject.add_observer(vendor)
        subject.set_color(TrafficColors.RED)
        sink.reactions.clear()

        subject.remove_observer(vendor)
        subject.set_color(TrafficColors.GREEN)

        assert sink.lines == ["Traveller: start vehicle"]

    def test_unknown_color_uses_vehicle_default(self) -> None:
        subject, _ = _make_subject()
        sink = FakeReactionSink()
        subject.add_observer(VehicleObserver(observer_id=1, sink=sink))

        subject.set_color("purple")

        assert sink.lines == ["Traveller: slow down vehicle"]
