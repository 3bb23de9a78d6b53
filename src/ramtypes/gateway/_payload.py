from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from msgspec import Struct

from ._codes import OpCode
from ._commands import (
    HelloData,
    IdentifyData,
    PresenceUpdateData,
    RequestGuildMembersData,
    RequestSoundboardSoundsData,
    ResumeData,
    VoiceStateUpdateData,
)

__all__: Sequence[str] = (
    "Dispatch",
    "GatewayPayload",
    "Heartbeat",
    "HeartbeatAck",
    "Hello",
    "Identify",
    "InvalidSession",
    "PresenceUpdate",
    "ReceivablePayload",
    "Reconnect",
    "RequestGuildMembers",
    "RequestSoundboardSounds",
    "Resume",
    "SendablePayload",
    "VoiceStateUpdate",
)


class GatewayPayload(Struct):
    op: int
    d: Any | None = None
    s: int | None = None
    t: str | None = None


# Every variant below is tagged on "op", so the union aliases at the bottom of
# this module are valid msgspec decode targets.


class Dispatch(Struct, tag_field="op", tag=OpCode.DISPATCH.value):
    t: str
    s: int
    d: Any


class Heartbeat(Struct, tag_field="op", tag=OpCode.HEARTBEAT.value):
    # Last sequence number received, null before the first dispatch.
    d: int | None = None


class Identify(Struct, tag_field="op", tag=OpCode.IDENTIFY.value):
    d: IdentifyData


class PresenceUpdate(Struct, tag_field="op", tag=OpCode.PRESENCE_UPDATE.value):
    d: PresenceUpdateData


class VoiceStateUpdate(Struct, tag_field="op", tag=OpCode.VOICE_STATE_UPDATE.value):
    d: VoiceStateUpdateData


class Resume(Struct, tag_field="op", tag=OpCode.RESUME.value):
    d: ResumeData


class Reconnect(Struct, tag_field="op", tag=OpCode.RECONNECT.value):
    pass


class RequestGuildMembers(Struct, tag_field="op", tag=OpCode.REQUEST_GUILD_MEMBERS.value):
    d: RequestGuildMembersData


class InvalidSession(Struct, tag_field="op", tag=OpCode.INVALID_SESSION.value):
    # Whether the session may be resumed.
    d: bool


class Hello(Struct, tag_field="op", tag=OpCode.HELLO.value):
    d: HelloData


class HeartbeatAck(Struct, tag_field="op", tag=OpCode.HEARTBEAT_ACK.value):
    d: int | None = None


class RequestSoundboardSounds(Struct, tag_field="op", tag=OpCode.REQUEST_SOUNDBOARD_SOUNDS.value):
    d: RequestSoundboardSoundsData


SendablePayload = (
    Heartbeat
    | Identify
    | PresenceUpdate
    | VoiceStateUpdate
    | Resume
    | RequestGuildMembers
    | RequestSoundboardSounds
)

ReceivablePayload = Dispatch | Heartbeat | Reconnect | InvalidSession | Hello | HeartbeatAck
