import logging
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import credentials
from firebase_admin import messaging as admin_messaging

from config import FIREBASE_CREDENTIALS

logger = logging.getLogger(__name__)


def init_firebase() -> firebase_admin.App:
    """Initialize the default Firebase app once; later calls return it unchanged."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if FIREBASE_CREDENTIALS:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
        app = firebase_admin.initialize_app(cred)
    else:
        app = firebase_admin.initialize_app()
    logger.info("Firebase app initialized (project=%s)", app.project_id)
    return app


def _stringify_push_data(data: Optional[Dict[str, Any]]) -> Dict[str, str]:
    result: Dict[str, str] = {}
    if not isinstance(data, dict):
        return result
    for key, value in data.items():
        if value is None:
            continue
        result[str(key)] = value if isinstance(value, str) else str(value)
    return result


def send_push(
    token: Optional[str],
    *,
    title: str,
    body: str,
    data: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """Send one notification to a device token.

    Returns the message id, or ``None`` when there is no token or the send
    failed. Failures are logged and never raised.
    """
    if not token:
        return None

    message = admin_messaging.Message(
        notification=admin_messaging.Notification(title=title, body=body),
        data=_stringify_push_data(data),
        token=token,
    )
    try:
        message_id = admin_messaging.send(message)
    except Exception as exc:
        logger.exception("FCM push send failed: %s", exc)
        return None
    logger.info("Push sent: %s", message_id)
    return message_id
