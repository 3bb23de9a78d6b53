from __future__ import annotations

from collections.abc import Sequence

from ._codes import CloseCode, OpCode, lookup_close_code, lookup_opcode, should_reconnect
from ._commands import (
    LIBRARY_NAME,
    ActivityType,
    ActivityUpdate,
    ConnectionProperties,
    HelloData,
    IdentifyData,
    PresenceStatus,
    PresenceUpdateData,
    RequestGuildMembersData,
    RequestSoundboardSoundsData,
    ResumeData,
    ShardInfo,
    VoiceStateUpdateData,
)
from ._dispatch import (
    DISPATCH_DATA_TYPES,
    ApplicationCommandPermissionsUpdateData,
    AutoModerationActionExecutionData,
    ChannelPinsUpdateData,
    GuildBanData,
    GuildDeleteData,
    GuildEmojisUpdateData,
    GuildIntegrationsUpdateData,
    GuildMemberRemoveData,
    GuildMembersChunkData,
    GuildRoleData,
    GuildRoleDeleteData,
    GuildScheduledEventUserData,
    GuildSoundboardSoundDeleteData,
    GuildStickersUpdateData,
    IntegrationDeleteData,
    InviteCreateData,
    InviteDeleteData,
    MessageDeleteBulkData,
    MessageDeleteData,
    MessagePollVoteData,
    MessageReactionAddData,
    MessageReactionRemoveAllData,
    MessageReactionRemoveData,
    MessageReactionRemoveEmojiData,
    PresenceUpdateEventData,
    ReadyData,
    SoundboardSoundsData,
    ThreadDeleteData,
    ThreadListSyncData,
    ThreadMembersUpdateData,
    TypingStartData,
    VoiceChannelEffectSendData,
    VoiceServerUpdateData,
    WebhooksUpdateData,
    dispatch_data_type,
)
from ._events import DispatchEvent, lookup_event
from ._intents import ALL_INTENTS, DEFAULT_INTENTS, PRIVILEGED_INTENTS, Intents
from ._payload import (
    Dispatch,
    GatewayPayload,
    Heartbeat,
    HeartbeatAck,
    Hello,
    Identify,
    InvalidSession,
    PresenceUpdate,
    ReceivablePayload,
    Reconnect,
    RequestGuildMembers,
    RequestSoundboardSounds,
    Resume,
    SendablePayload,
    VoiceStateUpdate,
)
from ._url import GATEWAY_VERSION, GatewayCompression, GatewayEncoding, gateway_url

__all__: Sequence[str] = (
    "ALL_INTENTS",
    "DEFAULT_INTENTS",
    "GATEWAY_VERSION",
    "LIBRARY_NAME",
    "PRIVILEGED_INTENTS",
    "ActivityType",
    "ActivityUpdate",
    "CloseCode",
    "ConnectionProperties",
    "Dispatch",
    "DispatchEvent",
    "GatewayCompression",
    "GatewayEncoding",
    "GatewayPayload",
    "Heartbeat",
    "HeartbeatAck",
    "Hello",
    "HelloData",
    "Identify",
    "IdentifyData",
    "Intents",
    "InvalidSession",
    "OpCode",
    "PresenceStatus",
    "PresenceUpdate",
    "PresenceUpdateData",
    "ReceivablePayload",
    "Reconnect",
    "RequestGuildMembers",
    "RequestGuildMembersData",
    "RequestSoundboardSounds",
    "RequestSoundboardSoundsData",
    "Resume",
    "ResumeData",
    "SendablePayload",
    "ShardInfo",
    "VoiceStateUpdate",
    "VoiceStateUpdateData",
    "gateway_url",
    "lookup_close_code",
    "lookup_event",
    "lookup_opcode",
    "should_reconnect",
    "DISPATCH_DATA_TYPES",
    "ApplicationCommandPermissionsUpdateData",
    "AutoModerationActionExecutionData",
    "ChannelPinsUpdateData",
    "GuildBanData",
    "GuildDeleteData",
    "GuildEmojisUpdateData",
    "GuildIntegrationsUpdateData",
    "GuildMemberRemoveData",
    "GuildMembersChunkData",
    "GuildRoleData",
    "GuildRoleDeleteData",
    "GuildScheduledEventUserData",
    "GuildSoundboardSoundDeleteData",
    "GuildStickersUpdateData",
    "IntegrationDeleteData",
    "InviteCreateData",
    "InviteDeleteData",
    "MessageDeleteBulkData",
    "MessageDeleteData",
    "MessagePollVoteData",
    "MessageReactionAddData",
    "MessageReactionRemoveAllData",
    "MessageReactionRemoveData",
    "MessageReactionRemoveEmojiData",
    "PresenceUpdateEventData",
    "ReadyData",
    "SoundboardSoundsData",
    "ThreadDeleteData",
    "ThreadListSyncData",
    "ThreadMembersUpdateData",
    "TypingStartData",
    "VoiceChannelEffectSendData",
    "VoiceServerUpdateData",
    "WebhooksUpdateData",
    "dispatch_data_type",
)
