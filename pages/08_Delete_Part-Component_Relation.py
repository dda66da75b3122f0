import logging
import sqlite3

import streamlit as st

from mrp import bom, config, db, parts
from mrp.errors import MRPError

config.setup_logging()
logger = logging.getLogger(__name__)

connection = db.open_database()
part_list = parts.list_skus(connection)

parent_sku = st.selectbox('Select Part', part_list, key='parent_sku')
child_sku = st.selectbox('Select Component', part_list, key='component_sku')

if st.button('Delete'):
    try:
        bom.delete_entry(connection, parent_sku, child_sku)
        st.success('Part-Component relation deleted successfully.')
    except MRPError as e:
        st.error(str(e))
    except sqlite3.Error as e:
        logger.exception("Deleting BOM entry failed")
        st.error(f"Database error: {e}")

connection.close()
