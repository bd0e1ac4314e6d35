"""Daily income/expense summary pushed to every active user."""
import logging

import database
import messaging
from amounts import plain, whole
from config import APP_NAME, CURRENCY, SUMMARY_PAGE_SIZE
from database import iter_users, sum_by_type
from periods import day_bounds

logger = logging.getLogger(__name__)


def build_daily_summary(income, expenses):
    """Return ``(title, body, data)``, or ``None`` for a day without activity."""
    if income <= 0 and expenses <= 0:
        return None
    title = f"{APP_NAME} - Résumé quotidien"
    body = f"Aujourd'hui: +{whole(income)} {CURRENCY}, -{whole(expenses)} {CURRENCY}"
    data = {"type": "daily_summary", "income": plain(income), "expenses": plain(expenses)}
    return title, body, data


def _summarize_user(db, user, start, end):
    income, expenses = sum_by_type(db, user.id, start, end)
    summary = build_daily_summary(income, expenses)
    if summary is None:
        logger.debug("No activity today for %s", user.id)
        return None
    title, body, data = summary
    return messaging.send_push(user.fcm_token, title=title, body=body, data=data)


def send_daily_summary(now=None, page_size=SUMMARY_PAGE_SIZE):
    """Scheduled job: one summary notification per user with activity today.

    A failure for one user is logged and the run moves on to the next one.
    Returns the number of notifications dispatched.
    """
    sent = 0
    try:
        start, end = day_bounds(now)
        with database.SessionLocal() as db:
            for user in iter_users(db, page_size):
                if not user.fcm_token:
                    continue
                try:
                    if _summarize_user(db, user, start, end):
                        sent += 1
                except Exception:
                    logger.exception("Error sending daily summary to %s", user.id)
    except Exception:
        logger.exception("Error sending daily summary")
    logger.info("Daily summary: %d notification(s) sent", sent)
    return sent
