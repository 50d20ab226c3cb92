"""Main entry point for tasknook."""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from config import Settings
from logging_setup import setup_logging
from storage import Storage
from theme import Theme, color_supported

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task file (default: data/tasks.txt or TASKNOOK_DATA_FILE).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Console log level (default: WARNING or TASKNOOK_LOG_LEVEL).")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write full debug logs to this file.")
@click.option("--no-color", is_flag=True, help="Disable coloured output.")
def main(data_file: Optional[Path], log_level: Optional[str], log_file: Optional[Path], no_color: bool) -> None:
    """tasknook: track to-dos, deadlines and events from the terminal."""
    settings = Settings.from_env()
    console_level = logging.getLevelName(log_level.upper()) if log_level else settings.log_level
    setup_logging(console_level=console_level, log_file=log_file or settings.log_file)
    theme = Theme(settings.palette, enabled=color_supported(settings.color and not no_color))
    session = CLI(Storage(data_file or settings.data_file), theme)
    session.load()
    session.run()


if __name__ == "__main__":
    main()
