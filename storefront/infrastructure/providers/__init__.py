"""プロバイダーモジュール."""
from .cognito_auth_provider import CognitoAuthProvider, decode_jwt_payload
from .in_memory_auth_provider import InMemoryAuthProvider

__all__ = [
    "CognitoAuthProvider",
    "InMemoryAuthProvider",
    "decode_jwt_payload",
]
