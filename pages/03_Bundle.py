import logging
import sqlite3

import streamlit as st

from mrp import bundle, config, db, parts
from mrp.errors import MRPError

config.setup_logging()
logger = logging.getLogger(__name__)


def highlight_shortage(row):
    color = '#ff6666' if row['Stock'] < row['Qty Required'] else '#ccffcc'
    return [f'background-color: {color}' if col in ('Qty Required', 'Stock') else '' for col in row.index]


"""
# Bundle Assembly
Select a sub-assembly to see its components. A unit can be bundled when every component is in stock.
"""

connection = db.open_database()

try:
    sub_skus = parts.list_sub_assembly_skus(connection)
except sqlite3.Error as e:
    logger.exception("Loading sub-assembly SKUs failed")
    st.error(f"Failed to load SUB SKUs: {e}")
    st.stop()

parent_sku = st.selectbox('Select SUB SKU', sub_skus, index=None, key='bundle_sku')

if "bundle_message" in st.session_state:
    st.success(st.session_state.pop("bundle_message"))

if parent_sku:
    try:
        plan = bundle.plan_bundle(connection, parent_sku)
    except (MRPError, sqlite3.Error) as e:
        logger.exception(f"Loading {parent_sku} failed")
        st.error(f"Failed to load SKU details: {e}")
        st.stop()

    st.write(f"**Description:** {plan.parent.description}")
    st.write(f"**Stock:** {plan.parent.stock}")

    df = plan.to_frame()
    if df.empty:
        st.write(f"{parent_sku} has no components in the BOM.")
    else:
        st.dataframe(df.style.apply(highlight_shortage, axis=1), hide_index=True, use_container_width=True)

    if st.button('Bundle', type='primary', disabled=not plan.can_bundle):
        try:
            parent = bundle.bundle(connection, parent_sku)
            st.session_state["bundle_message"] = f"Bundling successful! {parent.sku} stock is now {parent.stock}."
            st.rerun()
        except MRPError as e:
            st.error(f"Bundling failed: {e}")
        except sqlite3.Error as e:
            logger.exception(f"Bundling {parent_sku} failed")
            st.error(f"Bundling failed: {e}")

connection.close()
