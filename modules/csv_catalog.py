"""
Flat-file catalog parsing.

Turns the spreadsheet's CSV export into Products. Spreadsheets maintained by
hand use Indonesian column names (``nama_item``, ``harga_jual``, ...) while
exports from other tools use English ones, so header names go through a
synonym table before they reach the Product model.

Parsing never raises on row content:
    - blank lines (including trailing ones) are skipped
    - short rows are padded with empty strings
    - malformed numbers become 0
    - rows lacking an id or a name are dropped
"""

from __future__ import annotations

import csv
import io
from typing import Dict, List, Tuple

from core.exceptions import RowParseError
from logging_config import get_logger
from models.product import Product


logger = get_logger(__name__)

DELIMITER = ","

# Lower-cased header -> canonical Product field
HEADER_SYNONYMS: Dict[str, str] = {
    "sku": "id",
    "id": "id",
    "nama_item": "name",
    "name": "name",
    "product_name": "name",
    "harga_jual": "price",
    "price": "price",
    "kategori": "category",
    "category": "category",
    "satuan": "unit",
    "weight": "unit",
    "unit": "unit",
    "image": "image",
    "image_url": "image",
    "jumlah": "stock",
    "stock": "stock",
    "quantity": "stock",
    "harga_beli": "cost_price",
    "nama_vendor": "vendor",
}


def map_header(header: str) -> Tuple[str, bool]:
    """
    Map a raw header to its Product field.

    Returns:
        (field_name, is_canonical). Unknown headers come back lower-cased
        with is_canonical False.
    """
    key = header.strip().lower()
    if key in HEADER_SYNONYMS:
        return HEADER_SYNONYMS[key], True
    return key, False


def parse_row(headers: List[str], values: List[str], line_number: int) -> Product:
    """
    Build a Product from one row.

    Args:
        headers: Raw header names from the first line
        values: Cell values for this row (may be shorter than headers)
        line_number: 1-based line number, for error messages

    Returns:
        Product

    Raises:
        RowParseError: If the row has no identifier or no name
    """
    canonical: Dict[str, str] = {}
    extras: Dict[str, str] = {}

    for index, header in enumerate(headers):
        value = values[index].strip() if index < len(values) else ""
        field_name, is_canonical = map_header(header)
        if not field_name:
            continue
        if is_canonical:
            # A later synonym column only fills a field that is still empty
            if not canonical.get(field_name):
                canonical[field_name] = value
        else:
            extras[field_name] = value

    try:
        return Product.from_dict(canonical, extras=extras)
    except ValueError as e:
        raise RowParseError(line_number, str(e)) from e


def parse_catalog_csv(text: str) -> List[Product]:
    """
    Parse CSV text into a list of Products.

    The first non-empty line is the header row. Malformed rows are skipped
    individually; the rest of the batch is still returned. A document the
    csv reader cannot tokenize (e.g. an unterminated quote running past the
    field size limit) yields the products read before the bad line.

    Args:
        text: Entire CSV document

    Returns:
        Parsed products in file order (possibly empty)
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")), delimiter=DELIMITER)

    headers: List[str] = []
    products: List[Product] = []
    skipped = 0

    try:
        for values in reader:
            if not any(v.strip() for v in values):
                continue

            if not headers:
                headers = [h.strip() for h in values]
                continue

            try:
                products.append(parse_row(headers, values, reader.line_num))
            except RowParseError as e:
                skipped += 1
                logger.debug(str(e))
    except csv.Error as e:
        # Unterminated quotes swallow the rest of the file; keep what came before
        logger.warning(f"CSV parsing stopped at line {reader.line_num}: {e}")

    if skipped:
        logger.info(f"Parsed {len(products)} products, skipped {skipped} incomplete rows")

    return products
