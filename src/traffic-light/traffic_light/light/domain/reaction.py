"""ReactionSink port — destination of the messages observers produce."""

from typing import Protocol

from traffic_light.light.domain.color import Color


class ReactionSink(Protocol):
    """Receives one human-readable reaction per observer notification.

    Implementations may print to stdout, render with Rich, log to structlog,
    or record for tests.
    """

    def reaction(
        self, role: str, observer_id: int, color: Color, message: str
    ) -> None: ...
