import logging
import sys
import time


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.created))
        base = f"{ts} : {record.levelname:<5} : {record.name} : {record.getMessage()}"
        if record.exc_info:
            base += f"\n{self.formatException(record.exc_info)}"
        return base


def configure_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(ConsoleFormatter())
    root.addHandler(handler)

    # the request logger middleware already emits one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("product_api").setLevel(numeric_level)

    logging.getLogger("product_api.logging").debug("Logging initialized: level=%s", level.upper())
