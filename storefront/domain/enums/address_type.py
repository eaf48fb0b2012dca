"""住所種別の列挙型."""
from enum import Enum


class AddressType(str, Enum):
    """住所の種別."""

    HOME = "home"
    OFFICE = "office"
    OTHER = "other"
