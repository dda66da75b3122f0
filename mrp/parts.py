import logging
import math

from . import config
from .db import read_df
from .errors import DuplicatePartError, PartNotFoundError
from .models import Part

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ['SKU', 'Description', 'Price', 'Stock']

# SQLite INTEGER is a signed 64-bit value
MAX_SQLITE_INT = 2**63 - 1


def list_skus(conn):
    response = conn.execute("SELECT sku FROM part ORDER BY sku")
    return [row[0] for row in response.fetchall()]


def list_sub_assembly_skus(conn, prefix=None):
    prefix = config.SUB_ASSEMBLY_PREFIX if prefix is None else prefix
    response = conn.execute("SELECT sku FROM part WHERE sku LIKE ? ORDER BY sku", (prefix + '%',))
    return [row[0] for row in response.fetchall()]


def find_part(conn, sku):
    row = conn.execute("SELECT sku, description, price, stock FROM part WHERE sku = ?", (sku,)).fetchone()
    return Part.from_row(row) if row else None


def get_part(conn, sku):
    part = find_part(conn, sku)
    if part is None:
        raise PartNotFoundError(sku)
    return part


def format_price(price):
    return f"{float(price):.{config.PRICE_DECIMALS}f}"


def parse_price(text):
    try:
        value = float(str(text).strip())
    except ValueError:
        raise ValueError("Invalid number format.") from None
    if not math.isfinite(value):
        raise ValueError("Invalid number format.")
    return value


def parse_stock(text):
    try:
        value = int(str(text).strip())
    except ValueError:
        raise ValueError("Invalid number format.") from None
    if not -MAX_SQLITE_INT - 1 <= value <= MAX_SQLITE_INT:
        raise ValueError("Invalid number format.")
    return value


def update_stock(conn, sku, price, stock):
    """Set price and stock of one part. Returns False when no row matched."""
    if price < 0:
        raise ValueError("Price cannot be negative.")
    if stock < 0:
        raise ValueError("Stock cannot be negative.")

    with conn:
        cursor = conn.execute("UPDATE part SET price = ?, stock = ? WHERE sku = ?", (price, stock, sku))
    if cursor.rowcount > 0:
        logger.info(f"Updated {sku}: price={price}, stock={stock}")
        return True
    logger.warning(f"No part updated for SKU {sku}")
    return False


def stock_report(conn):
    """Every part as a DataFrame with the report's column names, price as display text."""
    df = read_df(conn, 'SELECT sku, description, price, stock FROM part ORDER BY sku')
    df.columns = REPORT_COLUMNS
    df['Description'] = df['Description'].fillna('')
    df['Price'] = df['Price'].fillna(0).map(format_price)
    df['Stock'] = df['Stock'].fillna(0).astype(int)
    return df


def add_part(conn, part):
    sku = part.sku.strip()
    if not sku:
        raise ValueError("SKU cannot be empty.")
    if part.price < 0 or part.stock < 0:
        raise ValueError("Price and stock cannot be negative.")
    if find_part(conn, sku) is not None:
        raise DuplicatePartError(sku)

    with conn:
        conn.execute('INSERT INTO part (sku, description, price, stock) VALUES (?, ?, ?, ?)',
                     (sku, part.description.strip(), part.price, part.stock))
    logger.info(f"Added part {sku}")


def delete_part(conn, sku):
    get_part(conn, sku)
    with conn:
        conn.execute('DELETE FROM bom WHERE parent_sku = ?', (sku,))
        conn.execute('DELETE FROM bom WHERE sku = ?', (sku,))
        conn.execute('DELETE FROM part WHERE sku = ?', (sku,))
    logger.info(f"Deleted part {sku} and its BOM relations")
