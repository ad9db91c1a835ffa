import logging, datetime
from logging.config import dictConfig

from .config import get_settings

# logfmt encoder
def lf_encode(d: dict) -> str:
    def esc(v) -> str:
        s = str(v)
        if s == "" or any(ch in s for ch in (' ', '"', '=', '\\', '\n', '\r')):
            s = (s.replace('\\', '\\\\').replace('"', r'\"')
                  .replace('\n', r'\n').replace('\r', r'\r'))
            return f'"{s}"'
        return s
    return ' '.join(f'{k}={esc(v)}' for k, v in d.items())

STD_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "taskName",
    "color_message",
}

class LeanLogfmt(logging.Formatter):
    CORE = ("ts", "level", "logger", "msg")

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc)
                      .strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Copy ONLY user-supplied extras
        for k, v in record.__dict__.items():
            if k not in STD_ATTRS and not k.startswith("_"):
                base[k] = v

        line = lf_encode(base)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

LOG_LEVEL = get_settings().LOG_LEVEL.upper()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"lean": {"()": LeanLogfmt}},
    "handlers": {"console": {"class": "logging.StreamHandler",
                             "formatter": "lean",
                             "stream": "ext://sys.stderr"}},
    "root": {"level": LOG_LEVEL, "handlers": ["console"]},
    "loggers": {
        "uvicorn.access": {"level": "WARNING", "handlers": ["console"],
                           "propagate": False},
        "uvicorn.error":  {"level": "INFO", "handlers": ["console"],
                           "propagate": False},
        "google_search_agent": {"level": LOG_LEVEL, "handlers": ["console"],
                                "propagate": False},
    },
}

dictConfig(LOGGING_CONFIG)

log = logging.getLogger("google_search_agent")
