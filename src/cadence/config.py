#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Access to the packaged configuration for library callers, outside of a
Hydra application."""

from importlib import resources
from pathlib import Path

from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from cadence.constants import CONFIGS_ROOT
from cadence.formatter import WeeklyScheduleFormatter

DEFAULT_CONFIG_NAME = "render_schedules"


def config_path(config_name: str = DEFAULT_CONFIG_NAME) -> Path:
    return Path(str(resources.files(CONFIGS_ROOT) / f"{config_name}.yaml"))


def load_config(
    overrides: list[str] | None = None, config_name: str = DEFAULT_CONFIG_NAME
) -> DictConfig:
    """Load a packaged config, applying dotlist `overrides` such as
    `formatter.style=short`."""
    cfg = OmegaConf.load(config_path(config_name))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(overrides))
    return cfg


def build_formatter(cfg: DictConfig) -> WeeklyScheduleFormatter:
    return instantiate(cfg.formatter)
