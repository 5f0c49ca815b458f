"""
业务异常定义
"""
from typing import List, Optional


class BookInventoryException(Exception):
    """基础异常类"""
    pass


class DatabaseConnectionError(BookInventoryException):
    """数据库连接失败异常"""
    pass


class ConstraintError(BookInventoryException):
    """数据库约束冲突异常"""
    pass


class DuplicateBookError(ConstraintError):
    """重复书籍异常 (ISBN已存在)"""
    pass


class BookNotFoundError(BookInventoryException):
    """书籍未找到异常"""
    pass


class BookValidationError(BookInventoryException):
    """书籍数据验证异常

    errors 保存全部验证失败信息，str() 返回第一条
    """

    def __init__(self, errors, message: Optional[str] = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = list(errors)
        super().__init__(message or (self.errors[0] if self.errors else "Invalid book data"))
