import logging

from .db import read_df
from .errors import BomEntryError
from .models import BomEntry
from .parts import get_part

logger = logging.getLogger(__name__)


def children(conn, parent_sku):
    rows = conn.execute("SELECT parent_sku, sku, quantity FROM bom WHERE parent_sku = ? ORDER BY rowid",
                        (parent_sku,)).fetchall()
    return [BomEntry(row['parent_sku'], row['sku'], int(row['quantity'])) for row in rows]


def is_leaf(conn, sku):
    count = conn.execute("SELECT COUNT(*) FROM bom WHERE parent_sku = ?", (sku,)).fetchone()[0]
    return count == 0


def add_entry(conn, entry):
    if entry.parent_sku == entry.child_sku:
        raise BomEntryError("A part cannot be a component of itself.")
    if entry.quantity < 1:
        raise BomEntryError("Quantity must be at least 1.")
    get_part(conn, entry.parent_sku)
    get_part(conn, entry.child_sku)

    existing = conn.execute('SELECT 1 FROM bom WHERE parent_sku = ? AND sku = ?',
                            (entry.parent_sku, entry.child_sku)).fetchone()
    if existing:
        raise BomEntryError(f"{entry.child_sku} is already a component of {entry.parent_sku}.")

    with conn:
        conn.execute('INSERT INTO bom (parent_sku, sku, quantity) VALUES (?, ?, ?)',
                     (entry.parent_sku, entry.child_sku, entry.quantity))
    logger.info(f"Added {entry.quantity} x {entry.child_sku} to {entry.parent_sku}")


def delete_entry(conn, parent_sku, child_sku):
    with conn:
        cursor = conn.execute('DELETE FROM bom WHERE parent_sku = ? AND sku = ?', (parent_sku, child_sku))
    if cursor.rowcount == 0:
        raise BomEntryError('Part-Component relation does not exist.')
    logger.info(f"Removed {child_sku} from {parent_sku}")


def bom_table(conn):
    df = read_df(conn, 'SELECT parent_sku, sku, quantity FROM bom ORDER BY parent_sku, sku')
    df.columns = ['Parent SKU', 'Component SKU', 'Quantity']
    return df
