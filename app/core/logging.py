import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Настройка логирования приложения.

    Логи всех модулей пишутся в stdout через корневой логгер.

    :param level: Уровень логирования (DEBUG, INFO, WARNING, ...).
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["console"], "level": level.upper()},
    }
    logging.config.dictConfig(config)
