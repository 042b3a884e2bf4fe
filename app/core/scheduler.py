import logging
import os
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from app.core.config import settings
from app.core.database import SessionLocal
from app.services.test_session import test_session_service

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def expire_stale_test_sessions():
    db = SessionLocal()
    try:
        expired_count = test_session_service.expire_stale_sessions(db)
        if expired_count:
            logger.info(f"Expired {expired_count} stale test sessions")
    except Exception as e:
        db.rollback()
        logger.error(f"Error expiring stale test sessions: {e}")
    finally:
        db.close()


def start_scheduler():
    if os.getenv("TESTING") == "true":
        logger.info("Scheduler disabled in test environment")
        return

    if not scheduler.running:
        scheduler.add_job(
            expire_stale_test_sessions,
            'interval',
            minutes=settings.EXPIRY_SWEEP_INTERVAL_MINUTES,
            id='expire_stale_test_sessions',
            name='Expire Stale Test Sessions',
            replace_existing=True
        )
        scheduler.start()
        logger.info("Scheduler started with test session expiry job")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown()
        logger.info("Scheduler stopped")
