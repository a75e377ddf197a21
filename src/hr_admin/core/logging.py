import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure root logging for the API process."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    if not sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
