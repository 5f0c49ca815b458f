"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    VALID_ISBN,
    INVALID_ISBN,
    make_books
)

__all__ = [
    "SAMPLE_BOOKS",
    "VALID_ISBN",
    "INVALID_ISBN",
    "make_books"
]
