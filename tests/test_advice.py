from advice import REASONABLE, generate_advice

FOOD = "🍽️ Pour la nourriture"


def test_food_fragment_above_5000():
    advice = generate_advice(6000, 100000, 100000, "food")
    assert FOOD in advice


def test_food_fragment_absent_at_3000():
    advice = generate_advice(3000, 100000, 100000, "food")
    assert FOOD not in advice


def test_balance_and_budget_shares():
    advice = generate_advice(6000, 10000, 20000, None)
    assert "60% de votre solde actuel" in advice
    assert "30% de votre budget mensuel" in advice


def test_shopping_always_advised():
    advice = generate_advice(10, 100000, 100000, "shopping")
    assert "🛍️" in advice


def test_entertainment_gated_on_balance_share():
    assert "🎬" in generate_advice(4000, 10000, 100000, "entertainment")
    assert "🎬" not in generate_advice(2000, 10000, 100000, "entertainment")


def test_transport_gated_on_amount():
    assert "🚗" in generate_advice(3500, 100000, 100000, "transport")
    assert "🚗" not in generate_advice(3000, 100000, 100000, "transport")


def test_unknown_category_gets_no_category_fragment():
    advice = generate_advice(10, 100000, 100000, "health")
    assert advice == REASONABLE


def test_low_remaining_balance_warning():
    advice = generate_advice(900, 1000, 5000, None)
    assert "🚨 ATTENTION" in advice
    assert advice.endswith("Considérez reporter cette dépense si possible.")


def test_zero_denominators_skip_share_rules():
    advice = generate_advice(500, 0, 0, "entertainment")
    assert "%" not in advice
    # 0 - 500 < 0 still triggers the low-balance warning
    assert "🚨 ATTENTION" in advice
