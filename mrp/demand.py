"""
Demand analysis: how many leaf parts must be produced to reach a target
quantity of a sub-assembly.

The BOM is walked depth first. Stock held at any level is netted off before
descending, so only the shortfall of an assembly is pushed down to its
components. Leaf quantities are summed across every path that reaches them.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from .bom import children, is_leaf
from .parts import find_part, get_part

logger = logging.getLogger(__name__)

DEMAND_COLUMNS = ['SKU', 'Need', 'Stock', 'Description']


@dataclass
class DemandLine:
    sku: str
    need: int
    stock: int
    description: str = ""

    @property
    def sufficient(self) -> bool:
        return self.stock >= self.need


@dataclass
class DemandResult:
    sku: str
    quantity: int
    lines: List[DemandLine] = field(default_factory=list)

    @property
    def target(self) -> DemandLine:
        return self.lines[0]

    @property
    def components(self) -> List[DemandLine]:
        return self.lines[1:]

    def to_frame(self) -> pd.DataFrame:
        rows = [(line.sku, line.need, line.stock, line.description) for line in self.lines]
        return pd.DataFrame(rows, columns=DEMAND_COLUMNS)


def _stock(conn, sku) -> int:
    part = find_part(conn, sku)
    return part.stock if part else 0


def explode(conn, sku: str, qty: int, needed: Optional[Dict[str, int]] = None) -> Dict[str, int]:
    """
    Accumulate into `needed` the leaf quantities required to have `qty` of `sku`.

    A leaf part takes the whole quantity. An assembly first uses its own stock
    and explodes only what is left to build into its components.
    """
    if needed is None:
        needed = {}
    if qty <= 0:
        return needed

    if is_leaf(conn, sku):
        needed[sku] = needed.get(sku, 0) + qty
        return needed

    available = _stock(conn, sku)
    if available >= qty:
        return needed

    to_build = qty - available
    for entry in children(conn, sku):
        explode(conn, entry.child_sku, to_build * entry.quantity, needed)
    return needed


def analyze_demand(conn, sku: str, qty: int) -> DemandResult:
    if qty < 1:
        raise ValueError("Desired quantity must be at least 1.")

    target = get_part(conn, sku)
    missing = qty - target.stock

    result = DemandResult(sku, qty)
    result.lines.append(DemandLine(target.sku, max(missing, 0), target.stock, target.description))

    # the target's own stock is already netted in `missing`
    needed: Dict[str, int] = {}
    if missing > 0:
        for entry in children(conn, sku):
            explode(conn, entry.child_sku, missing * entry.quantity, needed)

    for raw_sku, need in needed.items():
        part = find_part(conn, raw_sku)
        if part is None:
            result.lines.append(DemandLine(raw_sku, need, 0))
        else:
            result.lines.append(DemandLine(raw_sku, need, part.stock, part.description))

    logger.info(f"Demand for {qty} x {sku}: shortfall {max(missing, 0)}, {len(needed)} leaf parts")
    return result
