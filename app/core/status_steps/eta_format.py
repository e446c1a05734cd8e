# app/core/status_steps/eta_format.py

ZERO_ETA = "00:00:00"
UNKNOWN_ETA = "~"


def format_eta(seconds: float | None) -> str:
    """
    초 → "HH:MM:SS"
    - 소수점 이하는 0 쪽으로 버림
    - 24시간 넘어도 시(hour)는 그대로 증가
    - 음수는 앞에 "-" (평균 속도가 실제보다 느리게 잡힌 경우)
    """
    if seconds is None:
        return UNKNOWN_ETA

    total = int(seconds)
    sign = "-" if total < 0 else ""
    total = abs(total)

    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{sign}{h:02d}:{m:02d}:{s:02d}"
