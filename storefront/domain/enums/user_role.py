"""ユーザーロールの列挙型."""
from enum import Enum


class UserRole(str, Enum):
    """プロフィールに保存されるロール."""

    CUSTOMER = "customer"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    def is_admin(self) -> bool:
        """管理画面にアクセスできるか."""
        return self in (UserRole.ADMIN, UserRole.SUPER_ADMIN)
