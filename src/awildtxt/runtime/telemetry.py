"""Logging and profiling for the editor, backed by telelog.

Everything in the package logs through this module:

``configure(...)`` -- install a telelog config, either explicit or from a preset
``get_logger(name)`` -- cached telelog logger bound to the active config
``record_event(name, ...)`` -- structured event at a given level
``span(name, ...)`` -- profiled block, optionally tracked as a component

Settings come from ``AWILDTXT_*`` environment variables (see
``TelemetrySettings.from_env``).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "AWILDTXT_"
PRESETS = ("development", "production", "performance")

_TRUTHY = {"1", "true", "yes", "on"}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(slots=True)
class TelemetrySettings:
    """Resolved logging settings for one process."""

    logger_name: str = "awildtxt"
    level: str = "INFO"
    log_file: str = ""
    json: bool = False
    console: bool = True
    color: bool = True
    buffered: bool = False
    buffer_size: int = 2048
    preset: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        def flag(name: str, default: bool) -> bool:
            raw = read(name)
            if raw is None:
                return default
            return raw.strip().lower() in _TRUTHY

        size = read("LOG_BUFFER_SIZE")
        return cls(
            logger_name=read("LOGGER") or "awildtxt",
            level=(read("LOG_LEVEL") or "INFO").upper(),
            log_file=read("LOG_FILE") or "",
            json=flag("LOG_JSON", False),
            console=not flag("DISABLE_CONSOLE", False),
            color=not flag("NO_COLOR", False),
            buffered=flag("LOG_BUFFERED", False),
            buffer_size=int(size) if size else 2048,
            preset=read("LOG_PRESET") or None,
        )


SETTINGS = TelemetrySettings.from_env()


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def build_preset(preset: str, settings: Optional[TelemetrySettings] = None) -> Any:
    """Return a ``tl.Config`` for one of the named presets."""

    settings = settings or SETTINGS
    key = preset.lower()
    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "awildtxt.log")
        config.with_buffering(True)
    elif key in {"performance", "performance_analysis"}:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(settings.log_file or "awildtxt-performance.log")
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    config.with_profiling(True)
    return config


def build_config(settings: Optional[TelemetrySettings] = None) -> Any:
    """Translate ``TelemetrySettings`` into a ``tl.Config``."""

    settings = settings or SETTINGS
    if settings.preset:
        return build_preset(settings.preset, settings)

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration.

    ``config`` and ``preset`` are mutually exclusive; with neither, the
    configuration is rebuilt from the environment. Cached loggers are
    dropped so the next ``get_logger`` call picks up the new config.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = build_preset(preset)
    elif config is None:
        config = build_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config()
    logger_name = name or SETTINGS.logger_name
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _emit(logger: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(payload)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach results to the span."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block.

    ``component=True`` tracks the block as a component named after the span,
    a string names the component explicitly. ``metadata`` is pushed as log
    context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


configure()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "build_config",
    "build_preset",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
