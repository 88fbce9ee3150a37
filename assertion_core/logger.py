import logging, json, sys, time, os

from .constants import DEFAULT_LOG_LEVEL


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record.

    Messages routinely quote attacker-typed assertion text, so every field is
    serialized by json.dumps instead of being spliced into a template.
    """
    converter = time.gmtime  # UTC timestamps

    def __init__(self, datefmt="%Y-%m-%dT%H:%M:%SZ"):
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        body = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            body["exc"] = self.formatException(record.exc_info)
        return json.dumps(body, ensure_ascii=False)


def _env_level():
    name = os.getenv("ASSERTION_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name="assertion_core", level=None, to_file=None):
    """Structured JSON-line logger shared by all assertion_core modules."""
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _env_level())

    if not logger.handlers:
        formatter = JsonFormatter()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
