"""
SVG Placeholder Images for Products

Shown by the presentation layer when a product image cannot be loaded.
Organized by catalog category (semen, batu-bata, genteng, pintu).

Edit these SVG definitions to customize the placeholder appearance.
"""

# Cement sacks
SEMEN_DEFAULT_SVG = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='200' height='80' viewBox='0 0 200 80'%3E"
    "%3Crect fill='%23ece7df' width='200' height='80'/%3E"
    "%3Crect x='70' y='12' width='60' height='50' rx='8' fill='%23b8ad9c' stroke='%23786c5a' stroke-width='2'/%3E"
    "%3Ctext x='100' y='74' font-family='Arial,sans-serif' font-size='11' "
    "fill='%23333' text-anchor='middle'%3ESEMEN%3C/text%3E"
    "%3C/svg%3E"
)

# Bricks
BATU_BATA_DEFAULT_SVG = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='200' height='80' viewBox='0 0 200 80'%3E"
    "%3Crect fill='%23f5ebe6' width='200' height='80'/%3E"
    "%3Crect x='55' y='20' width='40' height='18' fill='%23b5533c'/%3E"
    "%3Crect x='100' y='20' width='40' height='18' fill='%23b5533c'/%3E"
    "%3Crect x='77' y='42' width='40' height='18' fill='%23b5533c'/%3E"
    "%3Ctext x='100' y='74' font-family='Arial,sans-serif' font-size='11' "
    "fill='%23333' text-anchor='middle'%3EBATU BATA%3C/text%3E"
    "%3C/svg%3E"
)

# Roof tiles
GENTENG_DEFAULT_SVG = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='200' height='80' viewBox='0 0 200 80'%3E"
    "%3Crect fill='%23eeeeee' width='200' height='80'/%3E"
    "%3Cpath d='M60 55 L100 15 L140 55 Z' fill='%23777' stroke='%23444' stroke-width='2'/%3E"
    "%3Ctext x='100' y='74' font-family='Arial,sans-serif' font-size='11' "
    "fill='%23333' text-anchor='middle'%3EGENTENG%3C/text%3E"
    "%3C/svg%3E"
)

# Doors
PINTU_DEFAULT_SVG = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='200' height='80' viewBox='0 0 200 80'%3E"
    "%3Crect fill='%23f3eee8' width='200' height='80'/%3E"
    "%3Crect x='82' y='8' width='36' height='56' fill='%23a0744b' stroke='%235e4128' stroke-width='2'/%3E"
    "%3Ccircle cx='110' cy='38' r='2.5' fill='%23e0c068'/%3E"
    "%3Ctext x='100' y='74' font-family='Arial,sans-serif' font-size='11' "
    "fill='%23333' text-anchor='middle'%3EPINTU%3C/text%3E"
    "%3C/svg%3E"
)

# Generic fallback if category is unknown
GENERIC_DEFAULT_SVG = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='200' height='80' viewBox='0 0 200 80'%3E"
    "%3Crect fill='%23f0f0f0' width='200' height='80'/%3E"
    "%3Ccircle cx='100' cy='35' r='15' fill='none' stroke='%23999' stroke-width='2'/%3E"
    "%3Ctext x='100' y='72' font-family='Arial,sans-serif' font-size='11' "
    "fill='%23999' text-anchor='middle'%3EPRODUK%3C/text%3E"
    "%3C/svg%3E"
)


def get_default_image(category: str) -> str:
    """
    Get the placeholder SVG image for a product category.

    Args:
        category: Catalog category tag (case-insensitive)

    Returns:
        Data URI string for SVG image

    Example:
        >>> get_default_image('semen')
        'data:image/svg+xml,...'
    """
    type_map = {
        'semen': SEMEN_DEFAULT_SVG,
        'batu-bata': BATU_BATA_DEFAULT_SVG,
        'genteng': GENTENG_DEFAULT_SVG,
        'pintu': PINTU_DEFAULT_SVG,
    }

    return type_map.get((category or '').strip().lower(), GENERIC_DEFAULT_SVG)
