import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pmt.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names the handler so later calls can tell it is already attached.
def _attach(logger: logging.Logger, handler: logging.Handler, handler_name: str, level, fmt):
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)

# Keeps only the newest `keep` per-run debug logs.
def _prune_runs(run_dir: Path, name: str, keep: int):
    runs = sorted(run_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

def get_logger(
        name = "publicmeetingtimer",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 2 * 1024 * 1024,
        backup_count = 3,
        persistent = True,
        console = False,
        historical_debugs: int = 5
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log that survives between runs
    if persistent and not any(h.get_name() == f"{name}:persistent" for h in logger.handlers):
        _attach(logger,
                RotatingFileHandler(log_dir / f"{name}.log",maxBytes=max_bytes,backupCount=backup_count,encoding="utf-8"),
                f"{name}:persistent",level,fmt)

    # latest.log only ever holds the current run
    if not any(h.get_name() == f"{name}:latest" for h in logger.handlers):
        _attach(logger,
                logging.FileHandler(log_dir / "latest.log",mode="w",encoding="utf-8"),
                f"{name}:latest",level,fmt)

    # One full DEBUG log per run, oldest pruned
    if historical_debugs > 0 and not any(h.get_name() == f"{name}:historical_debug" for h in logger.handlers):
        run_dir = log_dir / "debug"
        run_dir.mkdir(parents=True,exist_ok=True)
        run_path = run_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        _attach(logger,logging.FileHandler(run_path,encoding="utf-8"),f"{name}:historical_debug",logging.DEBUG,fmt)
        _prune_runs(run_dir,name,historical_debugs)

    if console and not any(h.get_name() == f"{name}:console" for h in logger.handlers):
        _attach(logger,logging.StreamHandler(),f"{name}:console",level,fmt)

    return logger

log = get_logger(level=logging.DEBUG,console=False,historical_debugs=5)
log.info("=== INITIALIZED NEW SESSION ===")
