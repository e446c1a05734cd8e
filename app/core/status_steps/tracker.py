# app/core/status_steps/tracker.py

from datetime import datetime
from typing import Iterable

from app.core.hb_status import HBStatus
from app.core.line_classifier import (
    ENCODE_STARTED,
    chapter_count,
    get_encode_name,
    is_chapter_progress,
    line_contains,
    line_time,
    line_to_status,
)
from .eta_estimator import estimate_eta
from .eta_format import UNKNOWN_ETA
from .record import StatusRecord


def apply_indicators(record: StatusRecord, line: str) -> StatusRecord:
    """
    ETA 계산용 표시 줄 수집
    1. 챕터 수 줄 → num_chapters (마지막 줄이 이김)
    2. 챕터 완료 줄 → 줄 전체를 그대로 저장, 시각 파싱은 ETA 계산 때
    """
    n = chapter_count(line)
    if n is not None:
        return record.update(num_chapters=n)
    if is_chapter_progress(line):
        return record.add_estimator(line)
    return record


def apply_status(record: StatusRecord, line: str) -> StatusRecord:
    # 기본적으로 이전 줄의 상태가 유지된다
    verdict = line_to_status(line, record.status_text)

    if verdict in (HBStatus.SCANNING, HBStatus.SCAN_COMPLETE):
        record = record.reset()

    elif verdict == HBStatus.RIPPING:
        # RIPPING 으로 바꾼 바로 그 줄일 때만 새 작업 시작
        if line_contains(line, ENCODE_STARTED):
            record = record.reset().update(
                start_time=line_time(line),
                current_encode=get_encode_name(line),
            )

    elif verdict in (HBStatus.RIPPING_SUB_SCAN, HBStatus.RIPPING_ENCODING):
        record = record.update(eta=UNKNOWN_ETA)

    elif verdict == HBStatus.QUEUE_COMPLETE:
        record = record.update(end_time=line_time(line))

    # 어떤 경우든 상태 값은 기록
    return record.update(status_text=verdict)


def fold_line(record: StatusRecord, line: str) -> StatusRecord:
    """한 줄 반영 (순수 함수)"""
    return apply_status(apply_indicators(record, line), line)


def fold_lines(lines: Iterable[str], record: StatusRecord | None = None) -> StatusRecord:
    if record is None:
        record = StatusRecord()
    for line in lines:
        record = fold_line(record, line)
    return record


def finish_record(record: StatusRecord, now: datetime | None = None) -> StatusRecord:
    """줄 입력이 끝난 뒤 ETA/라벨 채우기"""
    return record.finish(estimate_eta(record, now))


def replay(lines: Iterable[str], now: datetime | None = None) -> StatusRecord:
    """
    로그 전체 재생 → ETA/라벨까지 채운 최종 스냅샷
    """
    return finish_record(fold_lines(lines), now)
