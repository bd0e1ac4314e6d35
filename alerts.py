"""Budget overrun alerts, evaluated whenever an expense is recorded."""
import logging

import database
import messaging
from amounts import plain, whole
from config import APP_NAME, BUDGET_ALERT_THRESHOLD, CURRENCY
from database import Transaction, User, sum_by_type
from periods import month_bounds

logger = logging.getLogger(__name__)


def budget_utilization(monthly_budget, current_balance):
    """Share of the monthly budget consumed, in percent.

    Undefined (``None``) when no positive budget is set.
    """
    if not monthly_budget or monthly_budget <= 0:
        return None
    return (monthly_budget - current_balance) * 100 / monthly_budget


def month_to_date(db, user, now=None):
    start, end = month_bounds(now)
    income, expenses = sum_by_type(db, user.id, start, end)
    balance = income - expenses
    budget = user.monthly_budget or 0.0
    return {
        "totalIncome": income,
        "totalExpenses": expenses,
        "currentBalance": balance,
        "monthlyBudget": budget,
        "budgetUtilization": budget_utilization(budget, balance),
    }


def build_budget_alert(current_balance, monthly_budget):
    """Return ``(title, body, data)`` when an alert is due, else ``None``."""
    utilization = budget_utilization(monthly_budget, current_balance)
    if current_balance < 0:
        body = f"Budget dépassé! Solde négatif de {whole(abs(current_balance))} {CURRENCY}"
    elif utilization is not None and utilization > BUDGET_ALERT_THRESHOLD:
        body = f"Attention! {whole(utilization)}% du budget utilisé"
    else:
        return None

    title = f"{APP_NAME} - Alerte Budget"
    data = {
        "type": "budget_alert",
        "balance": plain(current_balance),
        "budget": plain(monthly_budget or 0),
    }
    return title, body, data


def send_budget_alert(transaction_id, now=None):
    """Handle the creation of a transaction.

    Never raises: any failure is logged and the handler returns ``None``.
    """
    try:
        with database.SessionLocal() as db:
            transaction = db.get(Transaction, transaction_id)
            if transaction is None or transaction.type != "expense":
                return None

            user = db.get(User, transaction.user_id)
            if user is None:
                return None
            if not user.fcm_token:
                logger.debug("No FCM token for %s, skipping budget alert", user.id)
                return None

            totals = month_to_date(db, user, now)
            alert = build_budget_alert(
                totals["currentBalance"], totals["monthlyBudget"]
            )
            if alert is None:
                return None

            title, body, data = alert
            return messaging.send_push(user.fcm_token, title=title, body=body, data=data)
    except Exception:
        logger.exception("Error sending budget alert")
        return None
