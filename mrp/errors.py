class MRPError(Exception):
    """Base exception for MRP operations"""
    pass


class PartNotFoundError(MRPError):
    """SKU is not in the part table"""

    def __init__(self, sku):
        super().__init__(f"Part {sku} does not exist.")
        self.sku = sku


class DuplicatePartError(MRPError):
    """SKU already exists"""

    def __init__(self, sku):
        super().__init__(f"Part {sku} already exists.")
        self.sku = sku


class BomEntryError(MRPError):
    """Invalid or missing part-component relation"""
    pass


class InsufficientStockError(MRPError):
    """Not enough component stock to bundle"""

    def __init__(self, parent_sku, shortages):
        detail = ", ".join(f"{sku} (need {need}, have {have})" for sku, need, have in shortages)
        super().__init__(f"Cannot bundle {parent_sku}: insufficient stock for {detail}")
        self.parent_sku = parent_sku
        self.shortages = shortages
