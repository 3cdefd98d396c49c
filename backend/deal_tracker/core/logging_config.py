import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настройка логирования приложения (вызывается один раз при создании app)"""
    root = logging.getLogger("deal_tracker")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    # SQL логирует сам SQLAlchemy через echo, не дублируем
    root.propagate = False
