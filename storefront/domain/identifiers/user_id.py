"""ユーザー識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """認証プロバイダーが払い出すユーザーID（Cognito の sub など）.

    永続カートのパーティションキーにも使うため、空白を含む値は受け付けない。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("UserId cannot be empty")
        if any(ch.isspace() for ch in self.value):
            raise ValueError(f"UserId cannot contain whitespace: {self.value!r}")

    def __str__(self) -> str:
        return self.value
