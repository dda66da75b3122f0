import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv("MRP_DB_PATH", "VR-Factory.db")
REPORT_DIR = os.getenv("MRP_REPORT_DIR") or str(Path(DB_PATH).resolve().parent)
SUB_ASSEMBLY_PREFIX = os.getenv("MRP_SUB_PREFIX", "SUB-")
COMPANY_NAME = os.getenv("MRP_COMPANY_NAME", "Visual Robotics")
LOG_LEVEL = os.getenv("MRP_LOG_LEVEL", "INFO").upper()

PRICE_DECIMALS = 3
REPORT_ROWS_PER_PAGE = 40
MAX_DEMAND_QTY = 9999


def setup_logging():
    # basicConfig is a no-op once the root logger has handlers, so every page can call this
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
