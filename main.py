# main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from router import router
from auth import auth_router
from database import init_db
from messaging import init_firebase
from summary import send_daily_summary
from periods import local_zone
from config import (
    DAILY_SUMMARY_HOUR,
    DAILY_SUMMARY_MINUTE,
    ENABLE_SCHEDULER,
    LOG_LEVEL,
    TIMEZONE,
)
import logging
import uvicorn
from apscheduler.schedulers.background import BackgroundScheduler

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Raises on an unknown zone
local_zone(TIMEZONE)

scheduler = BackgroundScheduler(timezone=TIMEZONE)
scheduler.add_job(
    send_daily_summary,
    "cron",
    hour=DAILY_SUMMARY_HOUR,
    minute=DAILY_SUMMARY_MINUTE,
    id="send_daily_summary",
)  # Daily at 20:00 local by default


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    init_firebase()
    if ENABLE_SCHEDULER:
        scheduler.start()
        logger.info(
            "Daily summary scheduled at %02d:%02d (%s)",
            DAILY_SUMMARY_HOUR,
            DAILY_SUMMARY_MINUTE,
            TIMEZONE,
        )
    yield
    if scheduler.running:
        scheduler.shutdown(wait=False)


app = FastAPI(title="GèrTonArgent API", lifespan=lifespan)

app.include_router(router, prefix="/api", tags=["transactions"])
app.include_router(auth_router, prefix="/auth", tags=["authentication"])


@app.get("/")
def home():
    return {"message": "Welcome to GèrTonArgent API"}


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
