import asyncio
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from app.core.config import handbrake_log_path
from app.core.status_steps.record import StatusRecord
from app.core.status_steps.tracker import finish_record, fold_lines
from app.utils.io_utils import open_log_lines


def read_hb_status(log_path: str | Path | None = None, now: datetime | None = None) -> StatusRecord:
    """
    HandBrake 활동 로그를 처음부터 끝까지 다시 읽어 현재 상태 계산 (동기)

    로그 전체를 순차로 훑으므로 로그가 커지면 주기적으로 비워 주는 게 좋다.
    파일을 못 읽으면 OSError 를 그대로 올린다 (부분 결과 없음).
    """
    path = Path(log_path) if log_path else handbrake_log_path()
    logger.debug(f"[hb_status] replay {path}")

    try:
        with open_log_lines(path) as lines:
            record = fold_lines(lines)
    except OSError as e:
        logger.warning(f"[hb_status] 로그 읽기 실패 {path}: {e}")
        raise

    # 파일을 다 읽고 닫은 뒤에 ETA 계산
    record = finish_record(record, now)
    logger.debug(
        f"[hb_status] status={record.status_text.value} "
        f"samples={len(record.eta_estimators)} eta={record.eta!r}"
    )
    return record


async def get_hb_status(
    log_path: str | Path | None = None,
    now: datetime | None = None,
) -> Dict[str, Any]:
    """요청 1건 = 로그 재생 1회. 블로킹 I/O 는 스레드로"""
    record = await asyncio.to_thread(read_hb_status, log_path, now)
    return record.to_dict()
