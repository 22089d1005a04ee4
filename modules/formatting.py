"""Display formatting for rupiah amounts and unit labels."""

from __future__ import annotations

CURRENCY_PREFIX = "Rp"
DEFAULT_UNIT_LABEL = "Unit"


def format_number_id(amount: int) -> str:
    """
    Group digits the Indonesian way (``.`` as thousands separator).

    >>> format_number_id(1650000)
    '1.650.000'
    """
    return f"{amount:,}".replace(",", ".")


def format_rupiah(amount: int) -> str:
    """
    Format an amount for display.

    >>> format_rupiah(183150)
    'Rp 183.150'
    """
    return f"{CURRENCY_PREFIX} {format_number_id(amount)}"


def unit_label(unit: str) -> str:
    """
    Short per-unit label shown next to a cart line price.

    Sack products carry "55Kg / 1 Karung"; the cart shows the part after
    the slash. Labels without a slash are used as-is.

    >>> unit_label("55Kg / 1 Karung")
    '1 Karung'
    >>> unit_label("")
    'Unit'
    """
    text = (unit or "").strip()
    if " / " in text:
        return text.split(" / ", 1)[1]
    return text or DEFAULT_UNIT_LABEL
