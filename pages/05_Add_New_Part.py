import logging
import sqlite3

import streamlit as st

from mrp import config, db, parts
from mrp.errors import MRPError
from mrp.models import Part

config.setup_logging()
logger = logging.getLogger(__name__)

"""
# Add New Part
Please enter the information of the part you want to add to your inventory.
Note that the SKU must be unique. Sub-assemblies use SKUs starting with the sub-assembly prefix.
"""

sku = st.text_input('Enter SKU', key='sku')
description = st.text_input('Enter Description', key='description')
price = st.text_input('Enter Price', key='price', value='0')
stock = st.text_input('Enter Stock', key='stock', value='0')

connection = db.open_database()

if st.button('Add'):
    try:
        part = Part(sku, description, parts.parse_price(price), parts.parse_stock(stock))
        parts.add_part(connection, part)
        st.success(f"Part {part.sku.strip()} added.")
    except ValueError as e:
        st.error(f"Input error: {e}")
    except MRPError as e:
        st.error(str(e))
    except sqlite3.Error as e:
        logger.exception("Adding part failed")
        st.error(f"Database error: {e}")

if st.checkbox('Show Part data'):
    df = parts.stock_report(connection)
    if not df.empty:
        df.set_index('SKU', inplace=True)
        st.dataframe(df)
    else:
        st.write("No data available in the part table.")

connection.close()
