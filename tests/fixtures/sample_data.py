"""
测试用的样本数据
"""
from typing import Any, Dict, List

# 样本书籍数据（API请求格式）
SAMPLE_BOOKS: List[Dict[str, Any]] = [
    {
        "title": "Computer Networks",
        "author": "Andrew S. Tanenbaum",
        "isbn": "978-0132126953",
        "price": 89.50,
        "quantity": 10,
        "description": "Classic networking textbook",
    },
    {
        "title": "Data Structures and Algorithm Analysis",
        "author": "Mark Allen Weiss",
        "isbn": "978-0132576277",
        "price": 79.00,
        "quantity": 5,
        "description": "",
    },
    {
        "title": "Automate the Boring Stuff with Python",
        "author": "Al Sweigart",
        "isbn": "978-1593279929",
        "price": 39.95,
        "quantity": 0,
        "description": "Practical programming for total beginners",
    },
    {
        "title": "Python Crash Course",
        "author": "Eric Matthes",
        "isbn": "978-1593279288",
        "price": 35.99,
        "quantity": 3,
    },
]

VALID_ISBN = [
    "978-0123456789",
    "0123456789",
    "9787111213826",
    "978-7-111-21382-6",
    "12345678901234567890",
]

INVALID_ISBN = [
    "abc",
    "12345678901234567890123",
    "123456789",
    "978 0123456789",
    "978-01234X6789",
    "",
]


def make_books(count: int, prefix: str = "Book") -> List[Dict[str, Any]]:
    """生成count本ISBN不重复的书籍数据"""
    return [
        {
            "title": f"{prefix} {index:02d}",
            "author": "Generated Author",
            "isbn": f"978-00000000{index:02d}",
            "price": 10 + index,
            "quantity": index,
        }
        for index in range(1, count + 1)
    ]
