"""Discord Gateway schema catalog.

Opcodes, close codes, intents, dispatch event names and payload shapes as
``msgspec`` structs. Nothing here opens a connection or decodes bytes on its
own; pair the structs with a ``msgspec`` encoder/decoder.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import gateway
from .users import JSONObject, Snowflake, User

__all__: Sequence[str] = ("JSONObject", "Snowflake", "User", "gateway")
