"""住所・連絡先フォームの検証サービス."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_SAME_DIGITS = re.compile(r"(\d)\1+")
_INDIAN_MOBILE_PREFIXES = ("6", "7", "8", "9")

_ADDRESS_CHARS = re.compile(r"[a-zA-Z0-9\s.,#-]+")
_CITY_CHARS = re.compile(r"[a-zA-Z\s\-']+")
_STATE_CHARS = re.compile(r"[a-zA-Z\s\-]+")
_NAME_CHARS = re.compile(r"[a-zA-Z\s\-'.]+")

# (国名の別名, 正規表現, エラーメッセージ)
_POSTAL_RULES: tuple[tuple[tuple[str, ...], re.Pattern, str], ...] = (
    (("India", "IN"), re.compile(r"\d{6}"), "Please enter a valid Indian PIN code (6 digits)"),
    (
        ("United States", "US"),
        re.compile(r"\d{5}(-\d{4})?"),
        "Please enter a valid US ZIP code (12345 or 12345-6789)",
    ),
    (
        ("United Kingdom", "UK"),
        re.compile(r"[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}", re.IGNORECASE),
        "Please enter a valid UK postal code",
    ),
    (
        ("Canada", "CA"),
        re.compile(r"[A-Z]\d[A-Z]\s?\d[A-Z]\d", re.IGNORECASE),
        "Please enter a valid Canadian postal code",
    ),
)
_GENERIC_POSTAL = re.compile(r"[A-Z0-9\s-]{3,10}", re.IGNORECASE)


@dataclass(frozen=True)
class ValidationResult:
    """検証結果."""

    is_valid: bool
    error: str | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        """成功結果を生成する."""
        return cls(is_valid=True)

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        """失敗結果を生成する."""
        return cls(is_valid=False, error=error)


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def _is_blank(value: str | None) -> bool:
    return not value or value.strip() == ""


class AddressValidator:
    """住所・電話番号・氏名の検証サービス."""

    def validate_phone_number(self, phone: str | None) -> ValidationResult:
        """電話番号を検証する（任意項目）."""
        if _is_blank(phone):
            return ValidationResult.success()

        digits = _digits(phone)

        if len(digits) == 10:
            if _SAME_DIGITS.fullmatch(digits):
                return ValidationResult.failure("Phone number cannot be all the same digits")
            if digits[0] not in _INDIAN_MOBILE_PREFIXES:
                return ValidationResult.failure(
                    "Indian mobile numbers must start with 6, 7, 8, or 9"
                )
            return ValidationResult.success()

        if 7 <= len(digits) <= 15:
            if _SAME_DIGITS.fullmatch(digits):
                return ValidationResult.failure("Phone number cannot be all the same digits")
            # 10桁超は国番号付きとみなす
            if len(digits) > 10 and not digits.startswith(("1", "91")):
                return ValidationResult.failure("Invalid international phone number format")
            return ValidationResult.success()

        return ValidationResult.failure(
            "Phone number must be 10 digits (Indian) or 7-15 digits (international)"
        )

    def validate_postal_code(self, postal_code: str | None, country: str = "India") -> ValidationResult:
        """郵便番号を国ごとの書式で検証する."""
        if _is_blank(postal_code):
            return ValidationResult.failure("Postal code is required")

        cleaned = postal_code.strip().upper()
        for aliases, pattern, message in _POSTAL_RULES:
            if country in aliases:
                if not pattern.fullmatch(cleaned):
                    return ValidationResult.failure(message)
                return ValidationResult.success()

        if not _GENERIC_POSTAL.fullmatch(cleaned):
            return ValidationResult.failure("Please enter a valid postal code")
        return ValidationResult.success()

    def validate_address(self, address: str | None) -> ValidationResult:
        """住所行を検証する."""
        if _is_blank(address):
            return ValidationResult.failure("Address is required")
        cleaned = address.strip()
        if len(cleaned) < 5:
            return ValidationResult.failure("Address must be at least 5 characters long")
        if len(cleaned) > 200:
            return ValidationResult.failure("Address must be less than 200 characters")
        if not _ADDRESS_CHARS.fullmatch(cleaned):
            return ValidationResult.failure("Address contains invalid characters")
        return ValidationResult.success()

    def validate_city(self, city: str | None) -> ValidationResult:
        """市区町村を検証する."""
        if _is_blank(city):
            return ValidationResult.failure("City is required")
        cleaned = city.strip()
        if len(cleaned) < 2:
            return ValidationResult.failure("City must be at least 2 characters long")
        if len(cleaned) > 100:
            return ValidationResult.failure("City must be less than 100 characters")
        if not _CITY_CHARS.fullmatch(cleaned):
            return ValidationResult.failure(
                "City can only contain letters, spaces, hyphens, and apostrophes"
            )
        return ValidationResult.success()

    def validate_state(self, state: str | None) -> ValidationResult:
        """州を検証する."""
        if _is_blank(state):
            return ValidationResult.failure("State is required")
        cleaned = state.strip()
        if len(cleaned) < 2:
            return ValidationResult.failure("State must be at least 2 characters long")
        if len(cleaned) > 100:
            return ValidationResult.failure("State must be less than 100 characters")
        if not _STATE_CHARS.fullmatch(cleaned):
            return ValidationResult.failure("State can only contain letters, spaces, and hyphens")
        return ValidationResult.success()

    def validate_full_name(self, name: str | None) -> ValidationResult:
        """氏名を検証する（任意項目）."""
        if _is_blank(name):
            return ValidationResult.success()
        cleaned = name.strip()
        if len(cleaned) < 2:
            return ValidationResult.failure("Name must be at least 2 characters long")
        if len(cleaned) > 100:
            return ValidationResult.failure("Name must be less than 100 characters")
        if not _NAME_CHARS.fullmatch(cleaned):
            return ValidationResult.failure(
                "Name can only contain letters, spaces, hyphens, apostrophes, and periods"
            )
        return ValidationResult.success()

    def validate_address_form(self, data: dict[str, Any]) -> dict[str, str]:
        """住所フォーム全体を検証し、項目名→エラーメッセージを返す（空なら有効）."""
        country = data.get("country") or "India"
        results = {
            "full_name": self.validate_full_name(data.get("full_name")),
            "phone": self.validate_phone_number(data.get("phone")),
            "address_line_1": self.validate_address(data.get("address_line_1")),
            "city": self.validate_city(data.get("city")),
            "state": self.validate_state(data.get("state")),
            "postal_code": self.validate_postal_code(data.get("postal_code"), country),
        }
        return {field: r.error or "" for field, r in results.items() if not r.is_valid}


def format_phone_number(phone: str | None) -> str:
    """電話番号を表示用に整形する."""
    if not phone:
        return ""
    digits = _digits(phone)
    if len(digits) == 10:
        return f"+91 {digits[:5]} {digits[5:]}"
    if len(digits) == 12 and digits.startswith("91"):
        return f"+91 {digits[2:7]} {digits[7:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return f"+{digits}"


def format_postal_code(postal_code: str | None, country: str = "India") -> str:
    """郵便番号を表示用に整形する."""
    if not postal_code:
        return ""
    cleaned = postal_code.strip().upper()
    if country in ("United States", "US"):
        if len(cleaned) == 9 and "-" not in cleaned:
            return f"{cleaned[:5]}-{cleaned[5:]}"
    elif country in ("United Kingdom", "UK", "Canada", "CA"):
        if len(cleaned) == 6 and " " not in cleaned:
            return f"{cleaned[:3]} {cleaned[3:]}"
    return cleaned
