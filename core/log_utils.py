"""
core/log_utils.py | Logging Utility for Verbose Mode
Author: ChAI-Engine
Last-Updated: 2025-06-12
Non-std deps: None
Behavior: When --verbose is set, the log file is overwritten (not appended) on the first write of each run.
Subsequent writes in the same run append. Nothing is written to stdout, so the book_id output line stays clean.
"""
from typing import Optional
from pathlib import Path

_log_file_initialized = {}
_default_log_path = None


def set_log_path(log_path: Optional[str]):
    """
    Purpose: Set the default log file path for all log_event calls.
    Inputs: log_path (str | None) - None restores core/logs.txt
    Outputs: None
    """
    global _default_log_path
    _default_log_path = log_path


def configure_run_log(profile_config: dict) -> Path:
    """
    Purpose: Point logging at the active profile's log_path for this run.
    Inputs: profile_config (dict) - Profile from ports.profile_loader; 'log_path' is optional
    Outputs: log_file (Path) - The file log_event will write to
    Role: Called once by main.py before the database is opened. Profiles without a log_path keep core/logs.txt.
    """
    set_log_path(profile_config.get("log_path"))
    log_file = get_log_path()
    # Next write truncates, even if an earlier run in this process used the same file
    _log_file_initialized.pop(str(log_file.resolve()), None)
    return log_file


def get_log_path() -> Path:
    if _default_log_path:
        return Path(_default_log_path)
    return Path(__file__).parent / "logs.txt"


def log_event(msg: str, verbose: bool, log_path: Optional[str] = None) -> None:
    """
    Purpose: Write a tagged process event ([START], [STEP], [INFO], [END], [ERROR]) to the log file.
    Inputs:
        msg: Message to log (str)
        verbose: Whether to log (bool)
        log_path: Path to log file (Optional[str]); defaults to the path set via set_log_path or core/logs.txt.
    Outputs:
        None
    Role: Audit trail for the search workflow (query pattern, row counts, connection lifecycle).
    """
    if not verbose:
        return
    log_file = Path(log_path) if log_path else get_log_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    key = str(log_file.resolve())
    mode = "a"
    if not _log_file_initialized.get(key, False):
        mode = "w"
        _log_file_initialized[key] = True
    with log_file.open(mode, encoding="utf-8") as f:
        f.write(msg.rstrip("\n") + "\n")
