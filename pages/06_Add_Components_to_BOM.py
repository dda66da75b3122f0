import logging
import sqlite3

import streamlit as st

from mrp import bom, config, db, parts
from mrp.errors import MRPError
from mrp.models import BomEntry

config.setup_logging()
logger = logging.getLogger(__name__)

"""
# Add Components to BOM
Select a part and one of its direct components, and how many units of the component one unit of the part needs.
"""

connection = db.open_database()
part_list = parts.list_skus(connection)

parent_sku = st.selectbox('Select Part', part_list, key='parent_sku')
child_sku = st.selectbox('Select Component', part_list, key='child_sku')
quantity = st.text_input('Enter quantity per unit', key='quantity', value='1')

if st.button('Add'):
    try:
        entry = BomEntry(parent_sku, child_sku, parts.parse_stock(quantity))
        bom.add_entry(connection, entry)
        st.success(f"{entry.quantity} x {child_sku} added to {parent_sku}.")
    except ValueError as e:
        st.error(f"Input error: {e}")
    except MRPError as e:
        st.error(str(e))
    except sqlite3.Error as e:
        logger.exception("Adding BOM entry failed")
        st.error(f"Database error: {e}")

if st.checkbox('Show BOM data'):
    df = bom.bom_table(connection)
    if not df.empty:
        st.dataframe(df, hide_index=True)
    else:
        st.write("No data available in the BOM table.")

connection.close()
