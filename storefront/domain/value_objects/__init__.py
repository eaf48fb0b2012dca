"""値オブジェクトモジュール."""
from .auth_session import AuthSession, AuthUser
from .email import Email
from .money import Money
from .pagination import PaginationInfo

__all__ = [
    "AuthSession",
    "AuthUser",
    "Email",
    "Money",
    "PaginationInfo",
]
