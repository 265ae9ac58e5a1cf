import logging
import sys
from pathlib import Path

from checklist.config import Settings, get_settings

_NOISY_LIBRARIES = ("httpx", "httpcore")


class _ThirdPartyNoiseFilter(logging.Filter):
    """Keep checklist logs; only let HTTP library chatter through at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(_NOISY_LIBRARIES):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    level: int | str = logging.INFO,
    log_dir: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure root logging with a console handler and, when ``log_dir`` is
    given, a file handler that keeps everything.

    Call this once, before the first log record is emitted.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "checklist.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)


def configure_logging(settings: Settings | None = None) -> None:
    """Set up logging from ``CHECKLIST_LOG_LEVEL`` / ``CHECKLIST_LOG_DIR``."""
    settings = settings or get_settings()
    setup_logging(level=settings.log_level.upper(), log_dir=settings.log_dir)
