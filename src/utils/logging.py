import logging

from config.config import SETTINGS


class HealthCheckFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/healthz" not in msg and "/_stcore/health" not in msg


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, SETTINGS.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    for logger_name in ["tornado.access", "streamlit.web.server"]:
        logger = logging.getLogger(logger_name)
        logger.addFilter(HealthCheckFilter())
    # geopy logs every request at DEBUG including the API key in the URL
    logging.getLogger("geopy").setLevel(logging.WARNING)
