# app/core/line_classifier.py
"""
HandBrake 활동 로그 한 줄 → 상태 판정.

로그 형식에 대한 가정(패턴, 고정 오프셋)은 전부 이 모듈에만 둔다.
상태 없음 / 부작용 없음.
"""

import re
from datetime import date, datetime, time
from pathlib import PureWindowsPath

from app.core.hb_status import HBStatus, RIPPING_PHASES

# "[HH:MM:SS] ..." 의 HH:MM:SS 위치
TIME_SLICE = slice(1, 9)

ENCODE_STARTED = "Starting encode of "
SUB_SCAN_STARTED = "Starting Task: Subtitles Scan"
ENCODE_PASS_STARTED = "Starting Task: Encoding Pass"
WORK_FINISHED = "Finished work at"

# 타임스탬프가 앞에 붙은 줄만 ETA 샘플로 쓴다
TIME_PREFIX = r"^\[(?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d\] "

RIP_REGEXPS = {
    "DISC_SCAN_STARTED": re.compile(r"hb_scan: path=.*\btitle_index=0\b"),
    "SCAN_STARTED":      re.compile(r"hb_scan: path=|scan: scanning title \d+"),
    "SCAN_DONE":         re.compile(r"scan thread found \d+ valid title\(s\)"),
    "JOB_BOOKKEEPING":   re.compile(r"\d+ job\(s\) to process|Starting work at"),
    "TITLE_NUMBER":      re.compile(r"scan: title \d+ has (\d+) chapters?\s*$"),
    "CHAPTER_PROGRESS":  re.compile(TIME_PREFIX + r'.*sync: "Chapter \d+" \(\d+\) at frame'),
}


def line_contains(line: str, marker: str) -> bool:
    return marker in line


def line_to_status(line: str, current: HBStatus) -> HBStatus:
    """
    (line, 현재 단계) → 판정.
    아무 패턴에도 안 걸리면 현재 단계를 그대로 돌려준다.
    """
    if line_contains(line, ENCODE_STARTED):
        return HBStatus.RIPPING
    if line_contains(line, SUB_SCAN_STARTED):
        return HBStatus.RIPPING_SUB_SCAN
    if line_contains(line, ENCODE_PASS_STARTED):
        return HBStatus.RIPPING_ENCODING
    if line_contains(line, WORK_FINISHED):
        return HBStatus.QUEUE_COMPLETE

    # title_index=0 은 디스크 전체 스캔 → 어느 단계에서든 새 스캔
    if RIP_REGEXPS["DISC_SCAN_STARTED"].search(line):
        return HBStatus.SCANNING

    # 인코딩 직전에 HandBrake 가 대상 타이틀 하나를 다시 스캔한다.
    # 리핑 중의 스캔 로그는 새 디스크 스캔이 아니다.
    if RIP_REGEXPS["SCAN_STARTED"].search(line):
        return HBStatus.RIPPING if current in RIPPING_PHASES else HBStatus.SCANNING
    if RIP_REGEXPS["SCAN_DONE"].search(line):
        return HBStatus.RIPPING if current in RIPPING_PHASES else HBStatus.SCAN_COMPLETE

    if RIP_REGEXPS["JOB_BOOKKEEPING"].search(line):
        return HBStatus.RIPPING

    return current


def chapter_count(line: str) -> int | None:
    """챕터 수 표시 줄이면 챕터 수, 아니면 None"""
    m = RIP_REGEXPS["TITLE_NUMBER"].search(line)
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        return None


def is_chapter_progress(line: str) -> bool:
    return RIP_REGEXPS["CHAPTER_PROGRESS"].search(line) is not None


def line_time(line: str) -> str:
    return line[TIME_SLICE]


def get_encode_name(line: str) -> str:
    """
    "[23:55:58] Starting encode of /Users/me/Movies/Snatched.m4v" → "Snatched"
    """
    idx = line.find(ENCODE_STARTED)
    if idx < 0:
        return ""
    target = line[idx + len(ENCODE_STARTED):].strip().strip('"')
    if not target:
        return ""
    # 윈도우 경로(\)도 같이 처리
    return PureWindowsPath(target).stem


def get_date_from_time(hhmmss: str, reference: datetime | date | None = None) -> datetime:
    """HH:MM:SS 를 기준일(기본: 오늘)의 시각으로 변환"""
    if reference is None:
        reference = datetime.now()
    day = reference.date() if isinstance(reference, datetime) else reference
    return datetime.combine(day, time.fromisoformat(hhmmss))
