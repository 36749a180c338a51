# core/logger.py
import json, datetime, os

DEFAULT_LOGFILE = "easymath_log.jsonl"


def logfile_path(logfile=None) -> str:
    if logfile:
        return logfile
    return os.environ.get("EASYMATH_LOGFILE") or os.path.join(os.getcwd(), DEFAULT_LOGFILE)


def history_limit() -> int:
    try:
        return int(os.environ.get("EASYMATH_HISTORY_LIMIT", "20"))
    except ValueError:
        return 20


def log_solve(entry: dict, logfile=None) -> bool:
    """Append one solved equation to the history; False if the file cannot be written."""
    entry = dict(entry)
    entry.setdefault("ts", datetime.datetime.now().isoformat())
    try:
        with open(logfile_path(logfile), "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str, ensure_ascii=False) + "\n")
    except OSError:
        return False
    return True


def load_history(limit=None, logfile=None) -> list:
    """Newest entries first. Lines that are not JSON objects are skipped."""
    path = logfile_path(logfile)
    if not os.path.exists(path):
        return []
    entries = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(entry, dict):
                entries.append(entry)
    entries.reverse()
    if limit is None:
        limit = history_limit()
    return entries[:limit]


def clear_history(logfile=None) -> bool:
    path = logfile_path(logfile)
    if not os.path.exists(path):
        return True
    try:
        os.remove(path)
    except OSError:
        return False
    return True
