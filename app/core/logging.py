"""Structured logging setup."""
import logging, sys, json

_RESERVED = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    fmt: str = "%(asctime)s %(levelname)s %(name)s %(message)s",
) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_bff_handler", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler._bff_handler = True
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
