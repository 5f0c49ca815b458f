"""
书籍数据验证工具
"""
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

ISBN_PATTERN = re.compile(r"[0-9-]{10,20}")

REQUIRED_FIELDS = ("title", "author", "isbn", "price", "quantity")

MIN_SEARCH_LENGTH = 2

# price 列为 NUMERIC(10,2)，quantity 列为 32 位有符号 INTEGER
MAX_PRICE = Decimal("100000000")
PRICE_QUANTUM = Decimal("0.01")
MAX_QUANTITY = 2 ** 31 - 1


def is_blank(value: Any) -> bool:
    """缺失或只含空白"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_isbn(isbn: Any) -> bool:
    """ISBN只允许数字和连字符，长度10-20"""
    if not isinstance(isbn, str):
        return False
    return ISBN_PATTERN.fullmatch(isbn) is not None


def parse_price(value: Any) -> Optional[Decimal]:
    """解析价格，非数字、负数或超出 NUMERIC(10,2) 返回None"""
    if isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite() or price < 0 or price >= MAX_PRICE:
        return None
    # 99999999.995 四舍五入后同样越界
    if price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP) >= MAX_PRICE:
        return None
    return price


def parse_quantity(value: Any) -> Optional[int]:
    """解析库存数量，必须是非负整数"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= MAX_QUANTITY else None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number < 0 or number != number.to_integral_value():
        return None
    if number > MAX_QUANTITY:
        return None
    return int(number)


def validate_book_data(data: Dict[str, Any]) -> List[str]:
    """验证书籍数据，返回全部错误信息（空列表表示通过）"""
    errors = []
    missing = set()

    for field in REQUIRED_FIELDS:
        if is_blank(data.get(field)):
            errors.append(f"Field '{field}' is required")
            missing.add(field)

    for field in ("title", "author"):
        if field not in missing and not isinstance(data[field], str):
            errors.append(f"Field '{field}' must be a string")

    if "price" not in missing and parse_price(data["price"]) is None:
        errors.append("Price must be a valid positive number")

    if "quantity" not in missing and parse_quantity(data["quantity"]) is None:
        errors.append("Quantity must be a valid positive integer")

    if "isbn" not in missing and not validate_isbn(data["isbn"]):
        errors.append("ISBN format is invalid")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        errors.append("Description must be a string")

    return errors


def validate_search_query(query: Any) -> List[str]:
    """搜索关键字去除首尾空白后至少2个字符"""
    if not isinstance(query, str) or len(query.strip()) < MIN_SEARCH_LENGTH:
        return [f"Search query must be at least {MIN_SEARCH_LENGTH} characters long"]
    return []
