from __future__ import annotations

import platform
import sys
import typing
from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Final

from msgspec import Meta, Struct, field

from ramtypes.users import Snowflake

__all__: Sequence[str] = (
    "LIBRARY_NAME",
    "ActivityType",
    "ActivityUpdate",
    "ConnectionProperties",
    "HelloData",
    "IdentifyData",
    "PresenceStatus",
    "PresenceUpdateData",
    "RequestGuildMembersData",
    "RequestSoundboardSoundsData",
    "ResumeData",
    "ShardInfo",
    "VoiceStateUpdateData",
)

LIBRARY_NAME: Final[str] = sys.intern("discord-ram")


@typing.final
class ActivityType(int, Enum):
    GAME = 0
    STREAMING = 1
    LISTENING = 2
    WATCHING = 3
    CUSTOM = 4
    COMPETING = 5


@typing.final
class PresenceStatus(str, Enum):
    ONLINE = "online"
    DND = "dnd"
    IDLE = "idle"
    INVISIBLE = "invisible"
    OFFLINE = "offline"


class HelloData(Struct):
    heartbeat_interval: int  # milliseconds


class ConnectionProperties(Struct):
    system: str = field(name="os", default_factory=platform.system)
    browser: str = LIBRARY_NAME
    device: str = LIBRARY_NAME


class ShardInfo(Struct, array_like=True):
    shard_id: int
    shard_count: int


class ActivityUpdate(Struct, omit_defaults=True):
    name: str
    type: ActivityType
    # Only honoured for ActivityType.STREAMING.
    url: str | None = None
    state: str | None = None


class PresenceUpdateData(Struct):
    status: PresenceStatus
    # Unix time in milliseconds the client went idle, null when not idle.
    since: int | None = None
    activities: list[ActivityUpdate] = field(default_factory=list)
    afk: bool = False


class IdentifyData(Struct, omit_defaults=True):
    token: str
    intents: int
    properties: ConnectionProperties = field(default_factory=ConnectionProperties)
    compress: bool | None = None
    large_threshold: Annotated[int, Meta(ge=50, le=250)] | None = None
    shard: ShardInfo | None = None
    presence: PresenceUpdateData | None = None


class ResumeData(Struct):
    token: str
    session_id: str
    seq: int


class VoiceStateUpdateData(Struct):
    guild_id: Snowflake
    # None disconnects from voice.
    channel_id: Snowflake | None = None
    self_mute: bool = False
    self_deaf: bool = False


class RequestGuildMembersData(Struct, omit_defaults=True):
    """Request Guild Members data.

    ``query`` and ``user_ids`` are mutually exclusive. An empty ``query`` with
    ``limit`` 0 requests every member. ``nonce`` is echoed back in the
    matching GUILD_MEMBERS_CHUNK events and is ignored by Discord when longer
    than 32 bytes.
    """

    guild_id: Snowflake
    query: str | None = None
    limit: int | None = None
    presences: bool | None = None
    user_ids: list[Snowflake] | None = None
    nonce: str | None = None


class RequestSoundboardSoundsData(Struct):
    guild_ids: list[Snowflake]
