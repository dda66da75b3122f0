import logging
import sqlite3

import pandas as pd

from . import config

logger = logging.getLogger(__name__)


def connect(path=None):
    path = path or config.DB_PATH
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    logger.debug(f"Opened database {path}")
    return conn


def create_tables(conn):
    c = conn.cursor()
    c.execute('''CREATE TABLE IF NOT EXISTS part (
        sku TEXT PRIMARY KEY,
        description TEXT,
        price REAL DEFAULT 0,
        stock INTEGER DEFAULT 0 CHECK (stock >= 0))''')
    c.execute('''CREATE TABLE IF NOT EXISTS bom (
        parent_sku TEXT NOT NULL REFERENCES part (sku),
        sku TEXT NOT NULL REFERENCES part (sku),
        quantity INTEGER NOT NULL CHECK (quantity > 0),
        PRIMARY KEY (parent_sku, sku))''')
    conn.commit()


def read_df(conn, query, params=()):
    cursor = conn.execute(query, params)
    columns = [d[0] for d in cursor.description]
    data = [tuple(row) for row in cursor.fetchall()]
    return pd.DataFrame(data, columns=columns)


def open_database(path=None):
    """Connection with the schema in place, for pages opened before Home."""
    conn = connect(path)
    create_tables(conn)
    return conn
