#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging

import hydra
from omegaconf import DictConfig, OmegaConf
from rich.console import Console

from cadence.codec import load_schedules
from cadence.config import build_formatter
from cadence.display import display_occurrences, display_triggers
from cadence.formatter import WeeklyScheduleFormatter
from cadence.occurrences import upcoming_occurrences

logger = logging.getLogger(__name__)


def render(cfg: DictConfig, console: Console | None = None) -> str | None:
    """Render the schedules stored in `cfg.input` and print them, along with
    their notification triggers and upcoming occurrences if requested."""
    console = console or Console()
    if cfg.debug:
        logger.info(OmegaConf.to_yaml(cfg, resolve=True))
    formatter: WeeklyScheduleFormatter = build_formatter(cfg)
    logger.info(
        f"Rendering {cfg.input} for locale {formatter.localization.locale} "
        f"in {formatter.style} style"
    )
    schedules = load_schedules(cfg.input)
    text = formatter.render_schedules(schedules)
    if text is None:
        logger.warning(f"Nothing to display for {cfg.input}")
    else:
        console.print(text)
    if cfg.show_triggers:
        display_triggers(schedules, formatter.localization, console=console)
    if cfg.preview_count > 0:
        occurrences = {
            i: upcoming_occurrences(s, count=cfg.preview_count)
            for i, s in enumerate(schedules)
        }
        display_occurrences(occurrences, console=console)
    return text


@hydra.main(
    config_name="render_schedules",
    config_path="pkg://cadence.configs",
    version_base=None,
)
def main(cfg: DictConfig):
    render(cfg)


if __name__ == "__main__":
    main()
