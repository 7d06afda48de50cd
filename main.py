"""
primkit – Main entry point.

Configures logging from the environment and prints a few sample conversions,
as a quick smoke check that the package imports and runs.
"""
import logging

from primkit.config.logging_config import setup_logging_from_settings
from primkit.config.settings import get_settings
from primkit.extensions.duration import seconds_to_clock_format
from primkit.extensions.numeric import megabytes_to_bytes, round_to
from primkit.extensions.text import camelize

logger = logging.getLogger("primkit.main")


def main() -> None:
    """Print sample conversions through the configured logger."""
    setup_logging_from_settings(get_settings())
    logger.info("9999.3 seconds -> %s", seconds_to_clock_format(9999.3))
    logger.info("1.23556789 to 3 places -> %s", round_to(1.23556789, 3))
    logger.info("5 MB -> %d bytes", megabytes_to_bytes(5))
    logger.info("'hello world' camelized -> %s", camelize("hello world"))


if __name__ == "__main__":
    main()
