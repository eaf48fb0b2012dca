"""アプリケーション層の例外."""


class FormValidationError(Exception):
    """フォーム入力が不正（リクエストは送信しない）."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        detail = ", ".join(f"{field}: {message}" for field, message in self.field_errors.items())
        super().__init__(f"Invalid form: {detail}")
