from datetime import datetime

from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from app.services.status_service import get_hb_status

router = APIRouter(tags=["Status"])


@router.get("/status")
async def get_status_api(
    now: datetime | None = Query(None),   # 테스트/자동화용 기준 시각 (ISO-8601)
):
    """
    HandBrake 활동 로그 기준 현재 상태
    currentEncode / startTime / endTime / statusText / status / numChapters / etaEstimators / eta
    """
    try:
        return await get_hb_status(now=now)
    except FileNotFoundError as e:
        raise HTTPException(404, f"activity log not found: {e.filename}")
    except OSError as e:
        logger.error(f"[status] {e}")
        raise HTTPException(status_code=500, detail=str(e))
