"""Channelled logging for generation, events and the simulation tick."""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional

ROOT_LOGGER_NAME = "orrery"

DEFAULT_CHANNELS = {
    "generation": True,
    "events": True,
    "physics": False,
    "simulation": False,
}


@dataclass
class LoggerConfig:
    """Level and per-channel switches read from ``settings.json``."""

    level: int = logging.INFO
    channels: Dict[str, bool] = field(default_factory=DEFAULT_CHANNELS.copy)

    @classmethod
    def quiet(cls) -> "LoggerConfig":
        return cls(level=logging.CRITICAL, channels={name: False for name in DEFAULT_CHANNELS})

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        if not settings_path.exists():
            return cls()
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        level_name = str(data.get("logLevel", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        channels = DEFAULT_CHANNELS.copy()
        overrides = data.get("logChannels", {})
        if isinstance(overrides, dict):
            channels.update({str(name): bool(flag) for name, flag in overrides.items()})
        return cls(level=level, channels=channels)


class ChannelLogger:
    """Forwards records to a stdlib logger only while the channel is switched on."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._name = name
        self._logger = logger
        self._enabled = enabled

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)


class OrreryLogger:
    """Registry of channel loggers under the ``orrery`` logger hierarchy."""

    def __init__(self, config: LoggerConfig, *, configure_root: bool = True) -> None:
        if configure_root:
            logging.basicConfig(
                level=config.level,
                format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                stream=sys.stdout,
            )
        self._root = logging.getLogger(ROOT_LOGGER_NAME)
        self._root.setLevel(config.level)
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in config.channels.items():
            self._channels[name] = self._make_channel(name, enabled)

    def _make_channel(self, name: str, enabled: bool) -> ChannelLogger:
        return ChannelLogger(name, self._root.getChild(name), bool(enabled))

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Channels nobody configured stay silent until switched on.
            self._channels[name] = self._make_channel(name, False)
        return self._channels[name]

    def set_enabled(self, name: str, enabled: bool) -> None:
        self.channel(name).enabled = enabled

    def channels(self) -> Iterable[str]:
        return self._channels.keys()


def channel_of(logger: Optional[OrreryLogger], name: str) -> Optional[ChannelLogger]:
    """Return the named channel, or ``None`` when no logger was supplied."""

    if logger is None:
        return None
    return logger.channel(name)


def init_logger(settings_path: Optional[Path] = None) -> OrreryLogger:
    """Initialise logging from settings.json."""

    settings_path = settings_path or Path("settings.json")
    return OrreryLogger(LoggerConfig.from_settings(settings_path))


__all__ = [
    "ChannelLogger",
    "DEFAULT_CHANNELS",
    "LoggerConfig",
    "OrreryLogger",
    "ROOT_LOGGER_NAME",
    "channel_of",
    "init_logger",
]
