import logging
import sqlite3

import streamlit as st

from mrp import config, db

config.setup_logging()
logger = logging.getLogger(__name__)


def create_table():
    conn = db.connect()
    db.create_tables(conn)
    conn.close()
    logger.info(f"Database ready at {config.DB_PATH}")


try:
    create_table()
except sqlite3.Error as e:
    logger.exception("Could not prepare database")
    st.error(f"Database error: {e}")

st.markdown(f"""
# MRP SYSTEM
Stock, bills of materials and demand planning for **{config.COMPANY_NAME}**.

Database: `{config.DB_PATH}`

## How to use this app?
1. **Update Stock**: select a SKU and correct its price or stock on hand.
2. **Stock Report**: list every part and export the list as PDF.
3. **Bundle**: build one unit of a sub-assembly (SKUs starting with `{config.SUB_ASSEMBLY_PREFIX}`) from its components.
4. **Demand Analysis**: choose a sub-assembly and a desired quantity to see which raw parts must be produced.

New parts are added on the **Add New Part** page and their components on the **Add Components to BOM** page.
To delete a part, go to the **Delete Part** page. To delete a part-component relation, go to the **Delete Part-Component Relation** page.
""")
