from enum import Enum


class RoomType(str, Enum):
    """Room types known to the REST API.

    Raw type strings outside this enum are custom room types.
    """

    CHANNEL = "c"
    PRIVATE_GROUP = "p"
    DIRECT_MESSAGE = "d"
    LIVECHAT = "l"

    @classmethod
    def parse(cls, raw: "RoomType | str") -> "RoomType | str":
        """Return the enum member for ``raw``, or ``raw`` itself for custom types."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return raw
