"""Logging for the cloud usage reports.

Everything goes to data/<script>/logs/<script>_<timestamp>.log at DEBUG,
the console only shows INFO and up unless --debug is given.
"""
import logging
import pathlib
from datetime import datetime

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logger(script_name, log_root="data", console_level=logging.INFO):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # a second report in the same process gets its own log file
    for handler in [h for h in root_logger.handlers if getattr(h, "cloudusage", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    log_dir = pathlib.Path.cwd() / log_root / script_name / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_filename = log_dir / datetime.now().strftime(f"{script_name}_%Y-%m-%d_%H-%M-%S.log")

    formatter = logging.Formatter(FORMAT)
    for handler, level in ((logging.StreamHandler(), console_level),
                           (logging.FileHandler(log_filename), logging.DEBUG)):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.cloudusage = True
        root_logger.addHandler(handler)

    return log_filename
