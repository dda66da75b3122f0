from dataclasses import dataclass


@dataclass
class Part:
    sku: str
    description: str = ""
    price: float = 0.0
    stock: int = 0

    @classmethod
    def from_row(cls, row):
        return cls(
            sku=row["sku"],
            description=row["description"] or "",
            price=float(row["price"] or 0),
            stock=int(row["stock"] or 0),
        )


@dataclass
class BomEntry:
    parent_sku: str
    child_sku: str
    quantity: int
