"""Entry-point: load settings, configure logging and start the console UI."""
from __future__ import annotations

import logging

from .presentation.cli import config
from .presentation.cli.app import run


def configure_logging(settings: dict) -> None:
    logging.basicConfig(
        level=config.resolve_log_level(settings),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    settings = config.load_config()
    configure_logging(settings)
    run(settings)


if __name__ == "__main__":
    main()
