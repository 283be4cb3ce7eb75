import logging
import logging.config

_DEFAULT_MAX_CHARS = 200


class PayloadTruncateFilter(logging.Filter):
    """Shorten oversized log arguments.

    The normalizer logs the raw API fragment it failed to resolve; a whole
    forecast document would otherwise land in a single log line.
    """

    def __init__(self, max_chars: int = _DEFAULT_MAX_CHARS) -> None:
        super().__init__()
        self.max_chars = max_chars

    def _truncate(self, value: object) -> object:
        if isinstance(value, (str, dict, list, tuple)):
            text = value if isinstance(value, str) else repr(value)
            if len(text) > self.max_chars:
                return f"{text[: self.max_chars]}...<{len(text) - self.max_chars} more chars>"
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._truncate(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._truncate(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._truncate(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from hko_dashboard.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "payload_truncate": {
                    "()": "hko_dashboard.core.logging.PayloadTruncateFilter",
                    "max_chars": settings.log_payload_max_chars,
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["payload_truncate"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )
