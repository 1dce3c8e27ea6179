import logging
import sys

import structlog

from streamstats.config import get_settings
from streamstats.report import ObservationParseError, StatisticsReport, parse_observations


def configure_logging(log_level: str) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    logger = structlog.get_logger()
    logger.debug("Starting streamstats", settings=repr(settings))

    try:
        values = parse_observations(sys.stdin.read())
    except ObservationParseError as e:
        logger.error("Invalid input", token=e.token, position=e.position)
        sys.exit(1)

    report = StatisticsReport.from_settings(settings)
    report.feed_all(values)
    print(report.render())


if __name__ == "__main__":
    main()
