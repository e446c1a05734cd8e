# app/core/hb_status.py

from enum import Enum


class HBStatus(str, Enum):
    """
    HandBrake 활동 로그에서 읽어낸 작업 단계.
    값 자체가 JSON 으로 그대로 나가므로 문자열 enum 으로 둔다.
    """

    SCANNING = "SCANNING"
    SCAN_COMPLETE = "SCAN_COMPLETE"
    RIPPING = "RIPPING"
    RIPPING_SUB_SCAN = "RIPPING_SUB_SCAN"
    RIPPING_ENCODING = "RIPPING_ENCODING"
    QUEUE_COMPLETE = "QUEUE_COMPLETE"


RIPPING_PHASES = frozenset({
    HBStatus.RIPPING,
    HBStatus.RIPPING_SUB_SCAN,
    HBStatus.RIPPING_ENCODING,
})

SCAN_PHASES = frozenset({HBStatus.SCANNING, HBStatus.SCAN_COMPLETE})

# ETA 를 계산할 의미가 있는 단계
ETA_PHASES = frozenset({HBStatus.RIPPING_SUB_SCAN, HBStatus.RIPPING_ENCODING})

STATUS_LABELS = {
    HBStatus.SCANNING:         "Scanning source",
    HBStatus.SCAN_COMPLETE:    "Scan complete",
    HBStatus.RIPPING:          "Preparing encode",
    HBStatus.RIPPING_SUB_SCAN: "Scanning subtitles",
    HBStatus.RIPPING_ENCODING: "Encoding",
    HBStatus.QUEUE_COMPLETE:   "Queue complete",
}


def status_label(status: HBStatus) -> str:
    return STATUS_LABELS.get(status, "")
