import logging
import sqlite3
from datetime import datetime

import streamlit as st

from mrp import config, db, demand, parts, reports
from mrp.errors import MRPError

config.setup_logging()
logger = logging.getLogger(__name__)


def color_stock(row):
    color = '#ff6666' if row['Stock'] < row['Need'] else '#ccffcc'
    return [f'background-color: {color}' if col in ('Need', 'Stock') else '' for col in row.index]


"""
# Demand Analysis
Choose a sub-assembly and the quantity you want on hand. The table lists the shortfall
of the sub-assembly and the raw parts needed to build it.
"""

connection = db.open_database()

try:
    sub_skus = parts.list_sub_assembly_skus(connection)
except sqlite3.Error as e:
    logger.exception("Loading sub-assembly SKUs failed")
    st.error(f"Failed to load SUB SKUs: {e}")
    st.stop()

sku = st.selectbox('SKU', sub_skus, index=None, key='demand_sku')

if sku:
    # keyed by SKU so a new selection starts again at 1
    quantity = st.number_input('Desired Quantity', min_value=1, max_value=config.MAX_DEMAND_QTY,
                               value=1, step=1, key=f'demand_qty_{sku}')
    try:
        result = demand.analyze_demand(connection, sku, int(quantity))
    except (MRPError, ValueError, sqlite3.Error) as e:
        logger.exception(f"Demand analysis for {sku} failed")
        st.error(f"Failed to calculate needs: {e}")
        st.stop()

    st.write(f"**Description:** {result.target.description}")
    df = result.to_frame()
    st.dataframe(df.style.apply(color_stock, axis=1), hide_index=True, use_container_width=True)

    now = datetime.now()
    try:
        pdf_bytes = reports.demand_pdf(result, now=now)
        st.download_button(
            'Export PDF',
            data=pdf_bytes,
            file_name=f"{reports.DEMAND_PREFIX}-{reports.timestamp(now)}.pdf",
            mime='application/pdf',
        )
        if st.button('Save PDF to report folder'):
            path = reports.save_pdf(pdf_bytes, reports.DEMAND_PREFIX, now=now)
            st.success(f"PDF saved to: {path.resolve()}")
    except Exception as e:
        logger.exception(f"Exporting demand analysis for {sku} failed")
        st.error(f"Failed to export PDF: {e}")

connection.close()
