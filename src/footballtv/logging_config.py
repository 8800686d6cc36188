"""Logging setup for the footballtv CLI.

The console carries progress and failures; the per-run file under
``{data_dir}/logs`` also keeps the DEBUG lines where the parsers report
skipped markup (headings without text, matches before any heading).
"""

import logging
from datetime import datetime
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s %(levelname)-5s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

# Chrome driver chatter; only its warnings are worth a line
_QUIET_LOGGERS = ("nodriver",)


def _log_path(data_dir: str) -> Path:
    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"footballtv-{datetime.now():%Y%m%d-%H%M%S}.log"


def setup_logging(data_dir: str = "data", verbose: bool = False) -> Path:
    """Route log records to the console and to a fresh run file.

    Replaces any handlers already on the root logger, so repeated calls
    do not duplicate output.

    Args:
        data_dir: Base directory; the file goes to ``{data_dir}/logs/``.
        verbose: Show DEBUG records on the console too (INFO otherwise).

    Returns:
        Path of the run's log file.
    """
    log_file = _log_path(data_dir)

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    run_file = logging.FileHandler(log_file, encoding="utf-8")
    run_file.setLevel(logging.DEBUG)
    run_file.setFormatter(logging.Formatter(FILE_FORMAT))

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG)
    root.addHandler(console)
    root.addHandler(run_file)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
