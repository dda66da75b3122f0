"""
Bundling: consume component stock to build one unit of a sub-assembly.

The stock changes for one bundle run in a single transaction. Component
stock is read again inside the operation, so a plan shown earlier cannot
push a component below zero.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from .bom import children
from .errors import BomEntryError, InsufficientStockError
from .models import Part
from .parts import find_part, get_part

logger = logging.getLogger(__name__)


@dataclass
class BundleComponent:
    sku: str
    description: str
    required: int
    stock: int

    @property
    def sufficient(self) -> bool:
        return self.stock >= self.required


@dataclass
class BundlePlan:
    parent: Part
    components: List[BundleComponent] = field(default_factory=list)

    @property
    def can_bundle(self) -> bool:
        return bool(self.components) and all(c.sufficient for c in self.components)

    @property
    def shortages(self):
        return [(c.sku, c.required, c.stock) for c in self.components if not c.sufficient]

    def to_frame(self):
        rows = [(c.sku, c.description, c.required, c.stock) for c in self.components]
        return pd.DataFrame(rows, columns=['SKU', 'Description', 'Qty Required', 'Stock'])


def plan_bundle(conn, parent_sku) -> BundlePlan:
    parent = get_part(conn, parent_sku)
    plan = BundlePlan(parent)
    for entry in children(conn, parent_sku):
        child = find_part(conn, entry.child_sku)
        if child is None:
            # a BOM row naming a missing part can never be satisfied
            plan.components.append(BundleComponent(entry.child_sku, '', entry.quantity, 0))
            continue
        plan.components.append(BundleComponent(child.sku, child.description, entry.quantity, child.stock))
    return plan


def bundle(conn, parent_sku) -> Part:
    """
    Build one unit of parent_sku from its components.

    Decrements every component by its BOM quantity and increments the parent
    by one. Either all of these updates are committed or none are.

    Raises:
        PartNotFoundError: parent_sku is not a part
        InsufficientStockError: a component is short, nothing is changed
        sqlite3.Error: the database rejected an update, nothing is changed
    """
    with conn:
        # take the write lock before reading so the stock checked is the stock updated
        if not conn.in_transaction:
            conn.execute("BEGIN IMMEDIATE")
        plan = plan_bundle(conn, parent_sku)
        if not plan.components:
            raise BomEntryError(f"{parent_sku} has no components to bundle.")
        if not plan.can_bundle:
            raise InsufficientStockError(parent_sku, plan.shortages)

        conn.executemany("UPDATE part SET stock = stock - ? WHERE sku = ?",
                         [(c.required, c.sku) for c in plan.components])
        conn.execute("UPDATE part SET stock = stock + 1 WHERE sku = ?", (parent_sku,))

    logger.info(f"Bundled one {parent_sku} from {len(plan.components)} components")
    return get_part(conn, parent_sku)
