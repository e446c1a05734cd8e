# app/core/status_steps/eta_estimator.py

from datetime import datetime

import pandas as pd

from app.core.hb_status import HBStatus, ETA_PHASES
from app.core.line_classifier import get_date_from_time, line_time
from .eta_format import format_eta, ZERO_ETA, UNKNOWN_ETA
from .record import StatusRecord


def sample_points(estimators, reference: datetime) -> pd.Series:
    """챕터 완료 로그 줄들 → 기준일 기준 시각 Series (시간순)"""
    return pd.Series(
        [get_date_from_time(line_time(line), reference) for line in estimators],
        dtype="datetime64[ns]",
    )


def remaining_seconds(record: StatusRecord, now: datetime) -> float:
    """
    (평균 챕터 간격 × 남은 챕터 수 − 마지막 샘플 이후 경과) 를 초로.
    음수가 나와도 그대로 돌려준다.
    """
    points = sample_points(record.eta_estimators, now)

    # 연속된 샘플 사이 간격 n-1 개의 평균
    avg_ms = points.diff().dropna().mean() / pd.Timedelta(milliseconds=1)
    remaining_chapters = record.num_chapters - len(record.eta_estimators)
    ms_since_checkin = (pd.Timestamp(now) - points.iloc[-1]) / pd.Timedelta(milliseconds=1)

    return (avg_ms * remaining_chapters - ms_since_checkin) / 1000


def estimate_eta(record: StatusRecord, now: datetime | None = None) -> str:
    """
    최종 상태 기준 ETA 문자열
    - 큐 완료: "00:00:00"
    - 리핑/인코딩 단계 아님: ""
    - 샘플 2개 미만: "~"
    """
    if record.status_text == HBStatus.QUEUE_COMPLETE:
        return ZERO_ETA

    if record.status_text not in ETA_PHASES:
        return ""

    if len(record.eta_estimators) < 2:
        return UNKNOWN_ETA

    if now is None:
        now = datetime.now()
    elif now.tzinfo is not None:
        # 로그 시각은 로컬 벽시계 기준(naive)
        now = now.astimezone().replace(tzinfo=None)

    return format_eta(remaining_seconds(record, now))
