from decimal import Decimal, ROUND_HALF_UP


def whole(value):
    """Round to an integer string, halves away from zero (2.5 -> "3", -2.5 -> "-3")."""
    return str(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def plain(value):
    # 500.0 -> "500", 12.5 -> "12.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
