"""ユーザープロフィール・住所エンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..enums import AddressType, UserRole


@dataclass
class UserProfile:
    """ユーザープロフィール."""

    id: str
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None
    role: UserRole = UserRole.CUSTOMER

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserProfile:
        """APIレスポンスから復元する."""
        try:
            role = UserRole(data.get("role") or UserRole.CUSTOMER.value)
        except ValueError:
            role = UserRole.CUSTOMER
        return cls(
            id=str(data["id"]),
            email=data.get("email"),
            full_name=data.get("full_name"),
            phone=data.get("phone"),
            role=role,
        )


@dataclass
class UserAddress:
    """保存済み住所."""

    id: str
    address_line_1: str
    city: str
    state: str
    postal_code: str
    country: str = "India"
    address_type: AddressType = AddressType.HOME
    label: str | None = None
    full_name: str | None = None
    phone: str | None = None
    address_line_2: str | None = None
    is_default: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserAddress:
        """APIレスポンスから復元する."""
        return cls(
            id=str(data["id"]),
            address_line_1=data.get("address_line_1", ""),
            city=data.get("city", ""),
            state=data.get("state", ""),
            postal_code=data.get("postal_code", ""),
            country=data.get("country") or "India",
            address_type=AddressType(data.get("address_type") or "home"),
            label=data.get("label"),
            full_name=data.get("full_name"),
            phone=data.get("phone"),
            address_line_2=data.get("address_line_2"),
            is_default=bool(data.get("is_default", False)),
        )
