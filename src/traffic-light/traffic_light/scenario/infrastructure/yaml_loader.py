"""YAML scenario loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from traffic_light.light.domain.color import is_known_color
from traffic_light.light.infrastructure.registry import SUPPORTED_KINDS
from traffic_light.scenario.domain.config import (
    AddStep,
    RemoveStep,
    ScenarioConfig,
    SetColorStep,
)
from traffic_light.scenario.domain.observer import ScenarioObserver
from traffic_light.scenario.infrastructure.errors import (
    ScenarioLoadError,
    ScenarioValidationError,
)


class YamlScenarioLoader:
    """Loads, validates, and returns a ScenarioConfig from a YAML file."""

    def __init__(self, observer: ScenarioObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ScenarioConfig:
        """
        Load, validate, and return a ScenarioConfig from a YAML file.

        Raises:
            ScenarioLoadError: if the file is missing, unreadable, not UTF-8,
                or not valid YAML.
            ScenarioValidationError: if the schema is violated, an observer kind
                is unsupported, or a step references an undeclared observer.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_scenario(raw=raw)
        _check_references(cfg=cfg)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.scenario_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ScenarioLoadError(path=path) from exc
    except OSError as exc:
        reason = f"cannot read file ({exc.strerror})"
        raise ScenarioLoadError(path=path, reason=reason) from exc
    except UnicodeDecodeError as exc:
        raise ScenarioLoadError(path=path, reason="file is not valid UTF-8") from exc
    except yaml.YAMLError as exc:
        raise ScenarioLoadError(path=path, reason="invalid YAML") from exc


def _build_scenario(raw: Any) -> ScenarioConfig:
    try:
        return ScenarioConfig.model_validate(raw)
    except ValidationError as exc:
        raise ScenarioValidationError(str(exc)) from exc


def _check_references(cfg: ScenarioConfig) -> None:
    """
    Raise ScenarioValidationError listing ALL unsupported observer kinds and
    ALL steps that reference an undeclared observer (not just the first one).
    """
    problems: list[str] = []
    for name, spec in cfg.observers.items():
        if spec.kind not in SUPPORTED_KINDS:
            problems.append(f"observer '{name}' has unsupported kind '{spec.kind}'")

    for index, step in enumerate(cfg.steps):
        if not isinstance(step, (AddStep, RemoveStep)):
            continue
        if step.observer not in cfg.observers:
            problems.append(
                f"step {index} ({step.action}) references unknown observer"
                f" '{step.observer}'"
            )

    if problems:
        raise ScenarioValidationError("; ".join(problems))


def _emit_warnings(cfg: ScenarioConfig, observer: ScenarioObserver) -> None:
    for index, step in enumerate(cfg.steps):
        if isinstance(step, SetColorStep) and not is_known_color(step.color):
            observer.scenario_unknown_color_warning(color=step.color, step_index=index)
