"""
书籍模型
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional

PRICE_QUANTUM = Decimal("0.01")


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Book:
    """书籍模型 (不可变)"""
    title: str
    author: str
    isbn: str
    price: Decimal = Decimal("0.00")
    quantity: int = 0
    description: str = ""
    id: Optional[int] = None  # 数据库自增主键
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        # 价格统一为两位小数的Decimal，与表结构 NUMERIC(10,2) 一致
        price = Decimal(str(self.price)).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "quantity", int(self.quantity))
        object.__setattr__(self, "description", self.description or "")
        if self.id is not None:
            object.__setattr__(self, "id", int(self.id))
        object.__setattr__(self, "created_at", _to_datetime(self.created_at))
        object.__setattr__(self, "updated_at", _to_datetime(self.updated_at))

    def __repr__(self):
        return f"Book(id={self.id}, isbn='{self.isbn}', title='{self.title}')"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "price": float(self.price),
            "quantity": self.quantity,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        """从字典（API数据或数据库行）创建书籍"""
        return cls(
            id=data.get("id"),
            title=data.get("title", ""),
            author=data.get("author", ""),
            isbn=data.get("isbn", ""),
            price=data.get("price") if data.get("price") is not None else Decimal("0.00"),
            quantity=data.get("quantity") or 0,
            description=data.get("description") or "",
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
