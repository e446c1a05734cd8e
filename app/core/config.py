# app/core/config.py

import os
from pathlib import Path

DEFAULT_HANDBRAKE_LOG = "~/Library/Application Support/HandBrake/HandBrake-activitylog.txt"


def handbrake_log_path() -> Path:
    """
    HANDBRAKE_LOG_PATH 환경변수(.env 포함) → 로그 파일 경로
    앞의 ~ 는 홈 디렉터리로 확장
    """
    raw = os.getenv("HANDBRAKE_LOG_PATH", DEFAULT_HANDBRAKE_LOG).strip()
    return Path(raw).expanduser()


def log_level() -> str:
    return os.getenv("HB_STATUS_LOG_LEVEL", "INFO").upper().strip()
