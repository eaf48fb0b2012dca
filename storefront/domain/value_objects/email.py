"""サインアップ・サインインで入力されるメールアドレス."""
from __future__ import annotations

import re
from dataclasses import dataclass

MAX_EMAIL_LENGTH = 254

# ブラウザのメール入力欄と同じ規則（ドメインにはドットを必須とする）
_LOCAL_PART = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+$")
_DOMAIN_LABEL = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")


@dataclass(frozen=True)
class Email:
    """メールアドレス. 前後の空白を除き、ドメイン部は小文字に正規化する."""

    value: str

    def __post_init__(self) -> None:
        """バリデーションと正規化."""
        value = self.value.strip() if isinstance(self.value, str) else ""
        if not value:
            raise ValueError("Email is required")
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters")

        local, sep, domain = value.rpartition("@")
        labels = domain.split(".")
        if (
            not sep
            or not _LOCAL_PART.match(local)
            or len(labels) < 2
            or not all(_DOMAIN_LABEL.match(label) for label in labels)
        ):
            raise ValueError(f"Invalid email format: {value}")
        object.__setattr__(self, "value", f"{local}@{domain.lower()}")

    @property
    def domain(self) -> str:
        """ドメイン部."""
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value
