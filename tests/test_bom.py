import sqlite3

import pytest

from mrp import bom, db
from mrp.errors import BomEntryError, PartNotFoundError
from mrp.models import BomEntry


def test_children_keep_entry_order(conn):
    assert bom.children(conn, 'SUB-BOT') == [
        BomEntry('SUB-BOT', 'SUB-ARM', 2),
        BomEntry('SUB-BOT', 'SUB-BASE', 1),
        BomEntry('SUB-BOT', 'BOLT', 4),
    ]
    assert bom.children(conn, 'BOLT') == []


def test_is_leaf(conn):
    assert bom.is_leaf(conn, 'BOLT')
    assert not bom.is_leaf(conn, 'SUB-ARM')


def test_add_entry(conn):
    bom.add_entry(conn, BomEntry('SUB-ARM', 'PLATE', 2))
    assert BomEntry('SUB-ARM', 'PLATE', 2) in bom.children(conn, 'SUB-ARM')


@pytest.mark.parametrize('entry', [
    BomEntry('SUB-ARM', 'SUB-ARM', 1),
    BomEntry('SUB-ARM', 'PLATE', 0),
    BomEntry('SUB-ARM', 'MOTOR', 1),
])
def test_add_entry_rejects_invalid(conn, entry):
    with pytest.raises(BomEntryError):
        bom.add_entry(conn, entry)


def test_add_entry_needs_existing_parts(conn):
    with pytest.raises(PartNotFoundError):
        bom.add_entry(conn, BomEntry('SUB-ARM', 'GEAR', 1))


def test_delete_entry(conn):
    bom.delete_entry(conn, 'SUB-BOT', 'BOLT')
    assert [e.child_sku for e in bom.children(conn, 'SUB-BOT')] == ['SUB-ARM', 'SUB-BASE']

    with pytest.raises(BomEntryError):
        bom.delete_entry(conn, 'SUB-BOT', 'BOLT')


def test_bom_table(conn):
    table = bom.bom_table(conn)
    assert list(table.columns) == ['Parent SKU', 'Component SKU', 'Quantity']
    assert len(table) == 8


def test_create_tables_is_idempotent(conn):
    db.create_tables(conn)
    assert conn.execute("SELECT COUNT(*) FROM part").fetchone()[0] == 7


def test_schema_refuses_negative_stock(conn):
    with pytest.raises(sqlite3.IntegrityError):
        with conn:
            conn.execute("UPDATE part SET stock = -1 WHERE sku = 'BOLT'")


def test_open_database_creates_file(tmp_path):
    path = tmp_path / 'factory.db'
    connection = db.open_database(str(path))
    try:
        tables = {row[0] for row in connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    finally:
        connection.close()
    assert path.exists()
    assert {'part', 'bom'} <= tables
