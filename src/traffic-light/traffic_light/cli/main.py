"""CLI entrypoint for traffic-light — typer app with `demo` and `run` commands."""

import sys
from pathlib import Path

import structlog
import typer

from traffic_light.core.errors import TrafficLightError
from traffic_light.light.domain.reaction import ReactionSink
from traffic_light.light.infrastructure.monitor import StructlogTrafficLightMonitor
from traffic_light.light.infrastructure.sinks import (
    CompositeReactionSink,
    EchoReactionSink,
    RichReactionSink,
    StructlogReactionSink,
)
from traffic_light.scenario.application.runner import ScenarioRunner
from traffic_light.scenario.domain.config import ScenarioConfig
from traffic_light.scenario.domain.default import default_scenario
from traffic_light.scenario.infrastructure.observer import StructlogScenarioObserver
from traffic_light.scenario.infrastructure.yaml_loader import YamlScenarioLoader

app = typer.Typer(add_completion=False)

_LOG_FORMAT_HELP = "Log format: 'console' or 'json'"
_STYLE_HELP = "Reaction output style on stdout: 'plain', 'rich' or 'none'"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so that reactions on stdout stay readable.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _make_sink(log_format: str, style: str) -> ReactionSink:
    sinks: list[ReactionSink] = []
    if style == "plain":
        sinks.append(EchoReactionSink())
    elif style == "rich":
        sinks.append(RichReactionSink())
    elif style != "none":
        typer.echo(f"Invalid style: {style!r}. Must be 'plain', 'rich' or 'none'.")
        raise typer.Exit(code=1)
    # JSON runs are machine-read; reactions become log events too.
    if log_format == "json":
        sinks.append(StructlogReactionSink())
    return CompositeReactionSink(sinks=sinks)


def _run_scenario(config: ScenarioConfig, log_format: str, style: str) -> None:
    sink = _make_sink(log_format=log_format, style=style)
    runner = ScenarioRunner(
        config=config,
        sink=sink,
        monitor=StructlogTrafficLightMonitor(),
    )
    summary = runner.run()
    structlog.get_logger().info(
        "scenario.completed",
        name=summary.name,
        steps_applied=summary.steps_applied,
        final_color=summary.final_color,
        observer_ids=summary.observer_ids,
    )


@app.command()
def demo(
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
    style: str = typer.Option("plain", "--style", help=_STYLE_HELP),
) -> None:
    """Run the built-in intersection demo: red with two observers, then green."""
    try:
        _configure_structlog(log_format=log_format)
        _run_scenario(config=default_scenario(), log_format=log_format, style=style)
    except typer.Exit:
        raise
    except TrafficLightError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def run(
    scenario_path: Path = typer.Argument(..., help="Path to scenario YAML"),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
    style: str = typer.Option("plain", "--style", help=_STYLE_HELP),
) -> None:
    """Run a traffic light scenario from a YAML file."""
    try:
        _configure_structlog(log_format=log_format)
        loader = YamlScenarioLoader(observer=StructlogScenarioObserver())
        config = loader.load(path=scenario_path)
        _run_scenario(config=config, log_format=log_format, style=style)
    except typer.Exit:
        raise
    except TrafficLightError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
