"""
Tiger Soccer Club — console registration form.
Entry point: configures logging, binds the process console, runs one session.
"""
import logging
import sys

from tigerclub.config import settings
from tigerclub.console import Console
from tigerclub.handlers import RegistrationSession

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level_name,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    configure_logging()
    logger.info("Starting Tiger Soccer Club registration…")
    RegistrationSession(Console(sys.stdin, sys.stdout)).run()


if __name__ == "__main__":
    main()
