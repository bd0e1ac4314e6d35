# config.py
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gertonargent.db")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# Path to a service-account JSON; unset falls back to application default credentials
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")

TIMEZONE = os.getenv("TIMEZONE", "Africa/Abidjan")
DAILY_SUMMARY_HOUR = int(os.getenv("DAILY_SUMMARY_HOUR", "20"))
DAILY_SUMMARY_MINUTE = int(os.getenv("DAILY_SUMMARY_MINUTE", "0"))
SUMMARY_PAGE_SIZE = int(os.getenv("SUMMARY_PAGE_SIZE", "100"))
ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "true").lower() in ("1", "true", "yes")

CURRENCY = os.getenv("CURRENCY", "FCFA")
APP_NAME = "GèrTonArgent"

# Alert fires above this share (in %) of the monthly budget consumed
BUDGET_ALERT_THRESHOLD = 80

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
