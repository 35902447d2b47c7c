"""Price arithmetic for products and cart lines."""


def effective_price(base_price, promotional_price=None):
    """A promotional price, when present, replaces the base price."""
    if promotional_price is not None:
        return promotional_price
    return base_price


def unit_price(base_price, promotional_price=None, price_modifier=0.0):
    """Price of one cake in a given size: effective price plus the size modifier."""
    return round(effective_price(base_price, promotional_price) + (price_modifier or 0.0), 2)


def line_total(price, quantity):
    return round(price * quantity, 2)
