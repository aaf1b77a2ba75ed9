import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

NOISY_LOGGERS = ["sqlalchemy.engine", "httpx", "httpcore", "aiosqlite"]


def configure_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера приложения"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    numeric = getattr(logging, str(level).strip().upper(), None)
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # uvicorn пишет через корневой обработчик
    for name in ["uvicorn", "uvicorn.error"]:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    logger.info("Logging configured; root level=%s", logging.getLevelName(root.level))
