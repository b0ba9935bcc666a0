import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from sw.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def _has_handler(logger: logging.Logger, handler_name: str) -> bool:
    return any(h.get_name() == handler_name for h in logger.handlers)

def get_logger(
        name = "stopwatch",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 5 * 1024 * 1024,
        backup_count = 5,
        persistent = True,
        console = False,
        historical_debugs: int = 10
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log that survives across runs
    persistent_handler_name = f"{name}:persistent"
    if persistent and not _has_handler(logger, persistent_handler_name):
        persistent_handler = RotatingFileHandler(
            filename=log_dir / f"{name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            delay=False,
        )
        persistent_handler.setLevel(level)
        persistent_handler.setFormatter(fmt)
        persistent_handler.set_name(persistent_handler_name)
        logger.addHandler(persistent_handler)

    # Latest-only log, overwritten each run
    latest_handler_name = f"{name}:latest"
    if not _has_handler(logger, latest_handler_name):
        latest_handler = logging.FileHandler(
            filename=log_dir / "latest.log",
            mode="w",
            encoding="utf-8",
            delay=False
        )
        latest_handler.setLevel(level)
        latest_handler.setFormatter(fmt)
        latest_handler.set_name(latest_handler_name)
        logger.addHandler(latest_handler)

    # One DEBUG-level file per run, only the newest `historical_debugs` are kept
    historical_debug_handler_name = f"{name}:historical_debug"
    if historical_debugs > 0 and not _has_handler(logger, historical_debug_handler_name):
        historical_debug_path = log_dir / "debug"
        historical_debug_path.mkdir(parents=True,exist_ok=True)
        this_run_path = historical_debug_path / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"

        historical_debug_handler = logging.FileHandler(
            filename=this_run_path,
            encoding="utf-8",
            delay=False
        )
        historical_debug_handler.setLevel(logging.DEBUG)
        historical_debug_handler.setFormatter(fmt)
        historical_debug_handler.set_name(historical_debug_handler_name)
        logger.addHandler(historical_debug_handler)

        prune_debug_logs(historical_debug_path, name, historical_debugs)

    console_handler_name = f"{name}:console"
    if console and not _has_handler(logger, console_handler_name):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(fmt)
        console_handler.set_name(console_handler_name)
        logger.addHandler(console_handler)

    return logger

# Deletes all but the `keep` most recently modified per-run debug logs for `name`. Returns how many were removed.
def prune_debug_logs(debug_dir: Path, name: str, keep: int) -> int:
    runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    removed = 0
    for run in runs[keep:]:
        try:
            run.unlink()
            removed += 1
        except OSError:
            pass
    return removed

log = get_logger(level=logging.DEBUG,console=False,historical_debugs=10)
log.info("=== INITIALIZED NEW SESSION ===")
