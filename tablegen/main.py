"""
Multiplication table generator
Command-line entry point
"""

import sys

from pydantic import ValidationError

from tablegen.config import get_settings
from tablegen.logging import get_logger, setup_logging
from tablegen.session import TableSession


def main() -> int:
    """Load settings, configure logging and run one interactive session"""
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, dev=settings.is_dev)
    logger = get_logger(__name__)
    logger.info("Starting multiplication table generator", app_env=settings.app_env)

    return TableSession(settings=settings).run()


if __name__ == "__main__":
    sys.exit(main())
