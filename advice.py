"""Rule-based spending advice for a proposed expense."""
from amounts import whole
from schemas import Category

REASONABLE = "✅ Cette dépense semble raisonnable. Continuez votre bonne gestion financière!"


def _share(amount, total):
    # undefined against an empty total; the rules gated on it are skipped
    if not total:
        return None
    return amount / total * 100


def _category(value):
    try:
        return Category(value)
    except ValueError:
        return None


def generate_advice(expense_amount, current_balance, monthly_budget, category=None):
    balance_share = _share(expense_amount, current_balance)
    budget_share = _share(expense_amount, monthly_budget)

    advice = ""

    if balance_share is not None and balance_share > 50:
        advice += f"⚠️ Cette dépense représente {whole(balance_share)}% de votre solde actuel. "
        advice += "C'est une dépense importante qui pourrait impacter vos finances. "

    if budget_share is not None and budget_share > 20:
        advice += f"📊 Cette dépense représente {whole(budget_share)}% de votre budget mensuel. "

    kind = _category(category)
    if kind is Category.food:
        if expense_amount > 5000:
            advice += "🍽️ Pour la nourriture, considérez si vous pouvez réduire ce montant en cuisinant à la maison. "
    elif kind is Category.entertainment:
        if balance_share is not None and balance_share > 30:
            advice += "🎬 Cette dépense de loisirs est importante. Assurez-vous qu'elle en vaut vraiment la peine. "
    elif kind is Category.shopping:
        advice += "🛍️ Avant d'acheter, demandez-vous si cet article est vraiment nécessaire. "
    elif kind is Category.transport:
        if expense_amount > 3000:
            advice += "🚗 Considérez les alternatives moins chères comme le transport en commun. "

    if current_balance - expense_amount < monthly_budget * 0.1:
        advice += "🚨 ATTENTION: Après cette dépense, il vous restera très peu pour le reste du mois. "
        advice += "Considérez reporter cette dépense si possible."
    elif not advice:
        advice = REASONABLE

    return advice
