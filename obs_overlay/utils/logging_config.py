"""
프로젝트 공통 로깅 설정.

- 콘솔: WARNING 이상, 트레이스백 없이 한 줄 (상태 출력은 print로 따로 표시)
- 통합: logs/app.log (INFO 이상)
- 에러: logs/error.log (ERROR 이상, 트레이스백 포함)
- OBS 요청/응답: logs/obs.log

로그 디렉터리 기본값은 ~/obs-twitch/logs (.env 옆). LOG_DIR 로 변경.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _PrefixFilter(logging.Filter):
    """logger name prefix 기반 필터."""

    def __init__(self, *prefixes: str):
        super().__init__()
        self._prefixes = tuple(p for p in prefixes if p)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name or ""
        return any(name.startswith(p) for p in self._prefixes)


class _ConsoleFormatter(logging.Formatter):
    """콘솔용: 메시지만 출력하고 트레이스백은 파일 로그에만 남김."""

    def format(self, record: logging.LogRecord) -> str:
        if record.exc_info or record.exc_text:
            record = logging.makeLogRecord(record.__dict__)
            record.exc_info = None
            record.exc_text = None
        return super().format(record)


def default_log_dir() -> Path:
    return Path.home() / "obs-twitch" / "logs"


def _level_from_env(key: str, default: int) -> int:
    name = (os.environ.get(key) or logging.getLevelName(default)).upper()
    return getattr(logging, name, default)


def _mk_rotating_handler(path: Path, level: int, fmt: logging.Formatter) -> RotatingFileHandler:
    max_mb = int(os.environ.get("LOG_MAX_MB", "10"))
    backups = int(os.environ.get("LOG_BACKUP_COUNT", "5"))
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=max_mb * 1024 * 1024,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(log_dir: Optional[Union[Path, str]] = None) -> Path:
    """루트 로거/핸들러를 재설정하고 로그 디렉터리 경로 반환. LOG_DIR 환경변수로 위치 변경."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(logging.DEBUG)

    if log_dir is None:
        log_dir = os.environ.get("LOG_DIR") or default_log_dir()
    log_dir = Path(log_dir)
    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(_level_from_env("LOG_CONSOLE_LEVEL", logging.WARNING))
    ch.setFormatter(_ConsoleFormatter(LOG_FORMAT))
    root.addHandler(ch)

    root.addHandler(_mk_rotating_handler(log_dir / "app.log", logging.INFO, fmt))
    root.addHandler(_mk_rotating_handler(log_dir / "error.log", logging.ERROR, fmt))

    obs_h = _mk_rotating_handler(log_dir / "obs.log", logging.DEBUG, fmt)
    obs_h.addFilter(_PrefixFilter("obs_overlay.obs", "simpleobsws"))
    root.addHandler(obs_h)

    # websockets 프레임 로그는 너무 많음. simpleobsws는 obs.log로 받음
    noisy_level = _level_from_env("WEBSOCKET_LOG_LEVEL", logging.WARNING)
    logging.getLogger("websockets").setLevel(noisy_level)

    return log_dir
