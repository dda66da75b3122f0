import logging
import sqlite3

import pandas as pd
import streamlit as st

from mrp import config, db, parts
from mrp.errors import MRPError

config.setup_logging()
logger = logging.getLogger(__name__)

"""
# Update Stock
Select a SKU to see its record, then correct the price or the stock on hand.
"""

connection = db.open_database()
sku_list = parts.list_skus(connection)

sku = st.selectbox('SKU', sku_list, index=None, key='update_sku')

if sku:
    try:
        part = parts.get_part(connection, sku)
    except MRPError as e:
        st.error(str(e))
        st.stop()

    st.text_input('Description', value=part.description, disabled=True, key=f'desc_{sku}')
    price_text = st.text_input('Price', value=parts.format_price(part.price), key=f'price_{sku}')
    stock_text = st.text_input('Stock', value=str(part.stock), key=f'stock_{sku}')
    confirmed = st.checkbox('I am sure I want to update this record', key=f'confirm_{sku}')

    if st.button('Update Record'):
        if not confirmed:
            st.warning('Please confirm the update first.')
        else:
            try:
                new_price = parts.parse_price(price_text)
                new_stock = parts.parse_stock(stock_text)
                if parts.update_stock(connection, sku, new_price, new_stock):
                    st.success('Stock updated successfully.')
                    part = parts.get_part(connection, sku)
                else:
                    st.info('No changes made.')
            except ValueError as e:
                st.error(f"Input error: {e}")
            except sqlite3.Error as e:
                logger.exception(f"Updating {sku} failed")
                st.error(f"Database error: {e}")

    df = pd.DataFrame([(part.sku, part.description, parts.format_price(part.price), part.stock)],
                      columns=parts.REPORT_COLUMNS)
    df.set_index('SKU', inplace=True)
    st.dataframe(df)

connection.close()
