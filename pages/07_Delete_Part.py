import logging
import sqlite3

import streamlit as st

from mrp import config, db, parts
from mrp.errors import MRPError

config.setup_logging()
logger = logging.getLogger(__name__)

"""
# Delete Part
Deleting a part also removes every BOM relation it takes part in.
"""

connection = db.open_database()
part_list = parts.list_skus(connection)

sku = st.selectbox('Select Part', part_list, key='delete_sku')

if st.button('Delete') and sku:
    try:
        parts.delete_part(connection, sku)
        st.success(f"Part {sku} deleted successfully.")
    except MRPError as e:
        st.error(str(e))
    except sqlite3.Error as e:
        logger.exception(f"Deleting {sku} failed")
        st.error(f"Database error: {e}")

connection.close()
