from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import sys

load_dotenv()  # .env 파일 로드 (HANDBRAKE_LOG_PATH 등)

from loguru import logger
from app.core.config import log_level
from app.api import status_routes

logger.remove()
logger.add(sys.stderr, level=log_level())

app = FastAPI(title="HandBrake Status API", version="1.0")

# CORS 설정 (대시보드용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 필요 시 특정 도메인만 지정
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(status_routes.router, prefix="/api")

@app.get("/")
def root():
    return {"message": "HandBrake Status API is running 🚀"}
