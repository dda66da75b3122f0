import logging
import sqlite3
from datetime import datetime

import streamlit as st

from mrp import config, db, parts, reports

config.setup_logging()
logger = logging.getLogger(__name__)

"""
# Stock Report
"""

try:
    connection = db.open_database()
    report = parts.stock_report(connection)
    connection.close()
except sqlite3.Error as e:
    logger.exception("Loading stock report failed")
    st.error(f"Error loading stock report: {e}")
    st.stop()

if report.empty:
    st.write("No data available in the part table.")
else:
    st.dataframe(report.set_index('SKU'), use_container_width=True)

now = datetime.now()
try:
    pdf_bytes = reports.stock_report_pdf(report, now=now)
except Exception as e:
    logger.exception("Rendering stock report PDF failed")
    st.error(f"Failed to export PDF: {e}")
    st.stop()

col1, col2 = st.columns(2)
with col1:
    st.download_button(
        'Export Report as PDF',
        data=pdf_bytes,
        file_name=f"{reports.STOCK_REPORT_PREFIX}.pdf",
        mime='application/pdf',
    )
with col2:
    if st.button('Quick Save PDF'):
        try:
            path = reports.save_pdf(pdf_bytes, reports.STOCK_REPORT_PREFIX, now=now)
            st.success(f"Report saved as: {path.resolve()}")
        except OSError as e:
            logger.exception("Saving stock report PDF failed")
            st.error(f"Failed to save PDF: {e}")
