"""プロフィール・住所録サービス."""
from __future__ import annotations

import logging
from typing import Any

from storefront.domain.entities import UserAddress, UserProfile
from storefront.domain.ports import ApiError, ApiGateway
from storefront.domain.services import AddressValidator

from .errors import FormValidationError

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = (
    "address_type",
    "label",
    "full_name",
    "phone",
    "address_line_1",
    "address_line_2",
    "city",
    "state",
    "postal_code",
    "country",
    "is_default",
)


class ProfileService:
    """ログインユーザーのプロフィールと保存済み住所を扱う."""

    def __init__(self, api: ApiGateway, validator: AddressValidator | None = None) -> None:
        """初期化."""
        self._api = api
        self._validator = validator or AddressValidator()
        self._profile: UserProfile | None = None
        self._addresses: list[UserAddress] = []

    @property
    def profile(self) -> UserProfile | None:
        """プロフィール."""
        return self._profile

    @property
    def addresses(self) -> list[UserAddress]:
        """保存済み住所."""
        return list(self._addresses)

    def load(self) -> None:
        """プロフィールと住所を読み込む. 失敗した側は空のまま."""
        try:
            self._profile = UserProfile.from_dict(self._api.get("/api/profile", require_auth=True))
        except ApiError as e:
            logger.error(f"Error fetching profile: {e}")
            self._profile = None

        try:
            data = self._api.get("/api/profile/addresses", require_auth=True) or []
            self._addresses = [UserAddress.from_dict(a) for a in data]
        except ApiError as e:
            logger.error(f"Error fetching addresses: {e}")
            self._addresses = []

    def update_profile(self, full_name: str | None, phone: str | None) -> UserProfile:
        """氏名と電話番号を更新する.

        Raises:
            FormValidationError: 入力が不正
            ApiError: 更新に失敗
        """
        errors = {}
        name_result = self._validator.validate_full_name(full_name)
        if not name_result.is_valid:
            errors["full_name"] = name_result.error
        phone_result = self._validator.validate_phone_number(phone)
        if not phone_result.is_valid:
            errors["phone"] = phone_result.error
        if errors:
            raise FormValidationError(errors)

        data = self._api.put(
            "/api/profile",
            json={"full_name": full_name or "", "phone": phone or ""},
            require_auth=True,
        )
        self._profile = UserProfile.from_dict(data)
        return self._profile

    def add_address(self, address_data: dict[str, Any]) -> UserAddress:
        """住所を追加する."""
        payload = self._validated_payload(address_data)
        created = UserAddress.from_dict(
            self._api.post("/api/profile/addresses", json=payload, require_auth=True)
        )
        self._addresses.append(created)
        return created

    def update_address(self, address_id: str, address_data: dict[str, Any]) -> UserAddress:
        """住所を更新する."""
        payload = self._validated_payload(address_data)
        updated = UserAddress.from_dict(
            self._api.put(f"/api/profile/addresses/{address_id}", json=payload, require_auth=True)
        )
        self._addresses = [updated if a.id == address_id else a for a in self._addresses]
        return updated

    def delete_address(self, address_id: str) -> None:
        """住所を削除する."""
        self._api.delete(f"/api/profile/addresses/{address_id}", require_auth=True)
        self._addresses = [a for a in self._addresses if a.id != address_id]

    def set_default_address(self, address_id: str) -> None:
        """既定の住所を切り替える. 他の住所の既定フラグは手元で外す."""
        self._api.put(
            f"/api/profile/addresses/{address_id}",
            json={"is_default": True},
            require_auth=True,
        )
        for address in self._addresses:
            address.is_default = address.id == address_id

    def _validated_payload(self, address_data: dict[str, Any]) -> dict[str, Any]:
        errors = self._validator.validate_address_form(address_data)
        if errors:
            raise FormValidationError(errors)
        payload = {k: address_data[k] for k in ADDRESS_FIELDS if k in address_data}
        payload.setdefault("address_type", "home")
        payload.setdefault("country", "India")
        payload.setdefault("is_default", False)
        return payload
