"""Emulator configuration.

Defaults live in :class:`EmulatorConfig`. :func:`load_config` layers an
optional YAML file and ``key=value`` overrides on top of them with OmegaConf.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from octet.constants import FRAME_RATE, TICKS_PER_FRAME
from octet.errors import ConfigError
from octet.logging import LEVELS
from octet.rendering import create_color_scheme


@dataclass
class EmulatorConfig:
    instructions_per_frame: int = TICKS_PER_FRAME
    frame_rate: int = FRAME_RATE
    halt_on_invalid_opcode: bool = False
    seed: int = 0
    scale: int = 8
    color_scheme: str = "classic"
    log_level: str = "INFO"
    trace: bool = False


def validate_config(config: EmulatorConfig) -> EmulatorConfig:
    """Check value ranges that the type system cannot express."""
    if config.instructions_per_frame < 1:
        raise ConfigError(f"instructions_per_frame must be positive, got {config.instructions_per_frame}")
    if config.frame_rate < 1:
        raise ConfigError(f"frame_rate must be positive, got {config.frame_rate}")
    if config.scale < 1:
        raise ConfigError(f"scale must be positive, got {config.scale}")
    if config.log_level.upper() not in LEVELS:
        raise ConfigError(f"Unknown log level '{config.log_level}'. Available: {list(LEVELS)}")
    try:
        create_color_scheme(config.color_scheme)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return config


def load_config(path: Optional[str] = None, overrides: Sequence[str] = ()) -> EmulatorConfig:
    """Build a validated config from defaults, a YAML file and dot-list overrides."""
    schema = OmegaConf.structured(EmulatorConfig)
    try:
        layers = [schema]
        if path is not None:
            layers.append(OmegaConf.load(path))
        if overrides:
            layers.append(OmegaConf.from_dotlist(list(overrides)))
        merged = OmegaConf.merge(*layers)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    return validate_config(config)
