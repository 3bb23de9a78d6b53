from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from msgspec import Struct

__all__: Sequence[str] = ("JSONObject", "Snowflake", "User")

# Discord sends snowflakes as JSON strings, decode with ``strict=False``.
Snowflake = int

# Full API objects (guilds, channels, messages, ...) are carried untyped.
JSONObject = dict[str, Any]


class User(Struct):
    id: Snowflake
    username: str
    discriminator: str | None = None
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False
    system: bool = False
    public_flags: int = 0
