"""Main entry point: runs the counter scenario through store_logger."""

from contextlib import ExitStack
from pathlib import Path

from dotenv import load_dotenv

from sim import Sim, counter_reducer
from store_logger import (
    ConsoleChannel,
    HttpLogPoster,
    LoggerOptions,
    detect_color_support,
    load_settings,
    store_logger,
)
from store_logger.logging_config import setup_logging


def main():
    """Run the scenario."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file, settings.log_format)

    supports_color = (
        not settings.no_color
        and settings.log_format != "json"
        and detect_color_support()
    )
    options = LoggerOptions(supports_color=supports_color)

    with ExitStack() as stack:
        poster = None
        if settings.poster_url:
            poster = stack.enter_context(
                HttpLogPoster(settings.poster_url, timeout=settings.poster_timeout)
            )

        reducer = store_logger(
            options,
            log_poster=poster,
            channel=ConsoleChannel(colorize=supports_color),
        )(counter_reducer)

        Sim(reducer).run()


if __name__ == "__main__":
    main()
