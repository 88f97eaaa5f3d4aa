"""ReactionSink implementations — plain echo, Rich console, structlog, composite."""

import structlog
import typer
from rich.console import Console
from rich.text import Text

from traffic_light.light.domain.color import Color, TrafficColors
from traffic_light.light.domain.reaction import ReactionSink

# Rich styles for the role label, keyed by light color.
_COLOR_STYLES: dict[Color, str] = {
    TrafficColors.RED: "bold red",
    TrafficColors.GREEN: "bold green",
    TrafficColors.YELLOW: "bold yellow",
}


class EchoReactionSink:
    """Writes ``<role>: <message>`` lines to stdout."""

    def reaction(
        self, role: str, observer_id: int, color: Color, message: str
    ) -> None:
        typer.echo(f"{role}: {message}")


class RichReactionSink:
    """Writes reactions through a Rich console, styling the role by light color.

    Colors outside the known set are rendered unstyled.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def reaction(
        self, role: str, observer_id: int, color: Color, message: str
    ) -> None:
        style = _COLOR_STYLES.get(color, "")
        self._console.print(Text.assemble((f"{role}:", style), " ", message))


class StructlogReactionSink:
    """Logs each reaction as an ``observer.reaction`` event."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def reaction(
        self, role: str, observer_id: int, color: Color, message: str
    ) -> None:
        self._log.info(
            "observer.reaction",
            role=role,
            observer_id=observer_id,
            color=color,
            message=message,
        )


class CompositeReactionSink:
    """Delegates every reaction to each sink in order."""

    def __init__(self, sinks: list[ReactionSink]) -> None:
        self._sinks = sinks

    def reaction(
        self, role: str, observer_id: int, color: Color, message: str
    ) -> None:
        for sink in self._sinks:
            sink.reaction(
                role=role, observer_id=observer_id, color=color, message=message
            )
