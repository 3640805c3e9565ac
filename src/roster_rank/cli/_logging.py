import logging
import sys

# python-configuration and PyYAML log file lookups at DEBUG.
_THIRD_PARTY_LOGGERS = ("config", "yaml")

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(*, verbose: bool = False, level: str = "INFO") -> None:
    """Send roster logs to stderr.

    ``level`` comes from the ``logging.level`` setting; ``verbose`` forces DEBUG.
    An unrecognised level name falls back to INFO.
    """
    resolved = logging.DEBUG if verbose else logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolved)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
