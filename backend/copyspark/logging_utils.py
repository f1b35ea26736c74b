import logging
from typing import Any, Dict


LOGGER_NAME = "copyspark"
_LOGGER = logging.getLogger(LOGGER_NAME)


def get_logger(name: str = "") -> logging.Logger:
    return _LOGGER.getChild(name) if name else _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger (idempotent)."""
    _LOGGER.setLevel(level)
    if not any(getattr(h, "_copyspark", False) for h in _LOGGER.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        handler._copyspark = True  # type: ignore[attr-defined]
        _LOGGER.addHandler(handler)


def log_event(level: int, message: str, logger: logging.Logger = _LOGGER, **dimensions: Any) -> None:
    dims: Dict[str, Any] = dict(dimensions)
    if dims:
        message = f"{message} | " + " ".join(f"{k}={v}" for k, v in dims.items())
    logger.log(level, message, extra={"custom_dimensions": dims})
