import sys

from loguru import logger

from geocapture.core.config import Settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def setup_logging(settings: Settings) -> None:
    logger.remove()

    logger.add(
        sys.stdout,
        level=settings.log_level,
        format=LOG_FORMAT,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="10 MB",
            retention="14 days",
            level=settings.log_level,
            format=LOG_FORMAT,
        )

    logger.info(f"Logging initialized (env={settings.app_env}, level={settings.log_level})")
