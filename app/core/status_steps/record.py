# app/core/status_steps/record.py

from dataclasses import dataclass, field, replace

from app.core.hb_status import HBStatus, status_label


@dataclass(frozen=True)
class StatusRecord:
    """
    로그 한 번 재생(replay) 동안 누적되는 상태 값.
    frozen 이라 fold 단계마다 새 객체를 만든다.
    """

    current_encode: str = ""
    start_time: str = ""
    end_time: str = ""
    status_text: HBStatus = HBStatus.QUEUE_COMPLETE
    status: str = ""
    num_chapters: int = -1
    eta_estimators: tuple[str, ...] = field(default_factory=tuple)
    eta: str = ""

    def reset(self) -> "StatusRecord":
        """모든 항목을 기본값으로"""
        return StatusRecord()

    def update(self, **changes) -> "StatusRecord":
        return replace(self, **changes)

    def add_estimator(self, line: str) -> "StatusRecord":
        return replace(self, eta_estimators=self.eta_estimators + (line,))

    def finish(self, eta: str) -> "StatusRecord":
        """replay 종료 후 ETA/라벨 채우기"""
        return replace(self, eta=eta, status=status_label(self.status_text))

    def to_dict(self) -> dict:
        return {
            "currentEncode": self.current_encode,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "statusText": self.status_text.value,
            "status": self.status,
            "numChapters": self.num_chapters,
            "etaEstimators": list(self.eta_estimators),
            "eta": self.eta,
        }
