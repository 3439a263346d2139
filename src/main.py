"""
Railway Reservation Console

Entry point: wires the container and runs the menu loop.
"""

import sys

from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger


def main() -> int:
    settings = container.config_service()
    Logger.base.info(
        f'🚆 [MAIN] {settings.PROJECT_NAME} v{settings.VERSION} '
        f'(data file: {settings.RESERVATION_DATA_FILE}, seats: {settings.MAX_SEATS})'
    )
    return container.reservation_console().run()


if __name__ == '__main__':
    sys.exit(main())
