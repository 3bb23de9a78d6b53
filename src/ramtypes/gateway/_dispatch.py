from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Final

from msgspec import Struct

from ramtypes.users import JSONObject, Snowflake, User

from ._commands import ShardInfo
from ._events import DispatchEvent, lookup_event

__all__: Sequence[str] = (
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

_LOGGER: logging.Logger = logging.getLogger("ram.gateway.dispatch")


class ReadyData(Struct):
    v: int
    user: User
    guilds: list[JSONObject]
    session_id: str
    resume_gateway_url: str
    application: JSONObject
    shard: ShardInfo | None = None


class AutoModerationActionExecutionData(Struct):
    guild_id: Snowflake
    action: JSONObject
    rule_id: Snowflake
    rule_trigger_type: int
    user_id: Snowflake
    content: str
    matched_keyword: str | None
    matched_content: str | None
    channel_id: Snowflake | None = None
    message_id: Snowflake | None = None
    alert_system_message_id: Snowflake | None = None


class ApplicationCommandPermissionsUpdateData(Struct):
    id: Snowflake
    application_id: Snowflake
    guild_id: Snowflake
    permissions: list[JSONObject]


class ChannelPinsUpdateData(Struct):
    channel_id: Snowflake
    last_pin_timestamp: str | None = None
    guild_id: Snowflake | None = None


class GuildBanData(Struct):
    guild_id: Snowflake
    user: User


class GuildDeleteData(Struct):
    id: Snowflake
    # Missing when the bot was removed from the guild.
    unavailable: bool | None = None


class GuildEmojisUpdateData(Struct):
    guild_id: Snowflake
    emojis: list[JSONObject]


class GuildStickersUpdateData(Struct):
    guild_id: Snowflake
    stickers: list[JSONObject]


class GuildIntegrationsUpdateData(Struct):
    guild_id: Snowflake


class GuildMemberRemoveData(Struct):
    guild_id: Snowflake
    user: User


class GuildMembersChunkData(Struct):
    guild_id: Snowflake
    members: list[JSONObject]
    chunk_index: int
    chunk_count: int
    not_found: list[Snowflake] | None = None
    presences: list[JSONObject] | None = None
    nonce: str | None = None


class GuildRoleData(Struct):
    guild_id: Snowflake
    role: JSONObject


class GuildRoleDeleteData(Struct):
    guild_id: Snowflake
    role_id: Snowflake


class GuildScheduledEventUserData(Struct):
    guild_scheduled_event_id: Snowflake
    user_id: Snowflake
    guild_id: Snowflake


class GuildSoundboardSoundDeleteData(Struct):
    sound_id: Snowflake
    guild_id: Snowflake


class SoundboardSoundsData(Struct):
    soundboard_sounds: list[JSONObject]
    guild_id: Snowflake


class IntegrationDeleteData(Struct):
    id: Snowflake
    guild_id: Snowflake
    application_id: Snowflake | None = None


class InviteCreateData(Struct):
    channel_id: Snowflake
    code: str
    created_at: str
    max_age: int
    max_uses: int
    temporary: bool
    uses: int
    guild_id: Snowflake | None = None
    inviter: User | None = None
    target_type: int | None = None
    target_user: User | None = None
    target_application: JSONObject | None = None


class InviteDeleteData(Struct):
    channel_id: Snowflake
    code: str
    guild_id: Snowflake | None = None


class MessageDeleteData(Struct):
    id: Snowflake
    channel_id: Snowflake
    guild_id: Snowflake | None = None


class MessageDeleteBulkData(Struct):
    ids: list[Snowflake]
    channel_id: Snowflake
    guild_id: Snowflake | None = None


class MessagePollVoteData(Struct):
    user_id: Snowflake
    channel_id: Snowflake
    message_id: Snowflake
    answer_id: int
    guild_id: Snowflake | None = None


class MessageReactionAddData(Struct):
    user_id: Snowflake
    channel_id: Snowflake
    message_id: Snowflake
    emoji: JSONObject
    burst: bool
    type: int
    guild_id: Snowflake | None = None
    member: JSONObject | None = None
    message_author_id: Snowflake | None = None
    burst_colors: list[str] | None = None


class MessageReactionRemoveData(Struct):
    user_id: Snowflake
    channel_id: Snowflake
    message_id: Snowflake
    emoji: JSONObject
    burst: bool
    type: int
    guild_id: Snowflake | None = None


class MessageReactionRemoveAllData(Struct):
    channel_id: Snowflake
    message_id: Snowflake
    guild_id: Snowflake | None = None


class MessageReactionRemoveEmojiData(Struct):
    channel_id: Snowflake
    message_id: Snowflake
    emoji: JSONObject
    guild_id: Snowflake | None = None


class PresenceUpdateEventData(Struct):
    user: JSONObject
    guild_id: Snowflake
    status: str
    activities: list[JSONObject]
    client_status: JSONObject


class ThreadDeleteData(Struct):
    id: Snowflake
    guild_id: Snowflake
    parent_id: Snowflake
    type: int


class ThreadListSyncData(Struct):
    guild_id: Snowflake
    threads: list[JSONObject]
    members: list[JSONObject]
    channel_ids: list[Snowflake] | None = None


class ThreadMembersUpdateData(Struct):
    id: Snowflake
    guild_id: Snowflake
    member_count: int
    added_members: list[JSONObject] | None = None
    removed_member_ids: list[Snowflake] | None = None


class TypingStartData(Struct):
    channel_id: Snowflake
    user_id: Snowflake
    # Unix time in seconds.
    timestamp: int
    guild_id: Snowflake | None = None
    member: JSONObject | None = None


class VoiceServerUpdateData(Struct):
    token: str
    guild_id: Snowflake
    # None while the voice server is being reallocated.
    endpoint: str | None


class VoiceChannelEffectSendData(Struct):
    channel_id: Snowflake
    guild_id: Snowflake
    user_id: Snowflake
    emoji: JSONObject | None = None
    animation_type: int | None = None
    animation_id: int | None = None
    sound_id: Snowflake | None = None
    sound_volume: float | None = None


class WebhooksUpdateData(Struct):
    guild_id: Snowflake
    channel_id: Snowflake


DISPATCH_DATA_TYPES: Final[Mapping[DispatchEvent, Any]] = MappingProxyType(
    {
        DispatchEvent.APPLICATION_COMMAND_PERMISSIONS_UPDATE: ApplicationCommandPermissionsUpdateData,
        DispatchEvent.AUTO_MODERATION_ACTION_EXECUTION: AutoModerationActionExecutionData,
        DispatchEvent.AUTO_MODERATION_RULE_CREATE: JSONObject,
        DispatchEvent.AUTO_MODERATION_RULE_DELETE: JSONObject,
        DispatchEvent.AUTO_MODERATION_RULE_UPDATE: JSONObject,
        DispatchEvent.CHANNEL_CREATE: JSONObject,
        DispatchEvent.CHANNEL_DELETE: JSONObject,
        DispatchEvent.CHANNEL_PINS_UPDATE: ChannelPinsUpdateData,
        DispatchEvent.CHANNEL_UPDATE: JSONObject,
        DispatchEvent.ENTITLEMENT_CREATE: JSONObject,
        DispatchEvent.ENTITLEMENT_DELETE: JSONObject,
        DispatchEvent.ENTITLEMENT_UPDATE: JSONObject,
        DispatchEvent.GUILD_AUDIT_LOG_ENTRY_CREATE: JSONObject,
        DispatchEvent.GUILD_BAN_ADD: GuildBanData,
        DispatchEvent.GUILD_BAN_REMOVE: GuildBanData,
        DispatchEvent.GUILD_CREATE: JSONObject,
        DispatchEvent.GUILD_DELETE: GuildDeleteData,
        DispatchEvent.GUILD_EMOJIS_UPDATE: GuildEmojisUpdateData,
        DispatchEvent.GUILD_INTEGRATIONS_UPDATE: GuildIntegrationsUpdateData,
        DispatchEvent.GUILD_MEMBERS_CHUNK: GuildMembersChunkData,
        DispatchEvent.GUILD_MEMBER_ADD: JSONObject,
        DispatchEvent.GUILD_MEMBER_REMOVE: GuildMemberRemoveData,
        DispatchEvent.GUILD_MEMBER_UPDATE: JSONObject,
        DispatchEvent.GUILD_ROLE_CREATE: GuildRoleData,
        DispatchEvent.GUILD_ROLE_DELETE: GuildRoleDeleteData,
        DispatchEvent.GUILD_ROLE_UPDATE: GuildRoleData,
        DispatchEvent.GUILD_SCHEDULED_EVENT_CREATE: JSONObject,
        DispatchEvent.GUILD_SCHEDULED_EVENT_DELETE: JSONObject,
        DispatchEvent.GUILD_SCHEDULED_EVENT_UPDATE: JSONObject,
        DispatchEvent.GUILD_SCHEDULED_EVENT_USER_ADD: GuildScheduledEventUserData,
        DispatchEvent.GUILD_SCHEDULED_EVENT_USER_REMOVE: GuildScheduledEventUserData,
        DispatchEvent.GUILD_SOUNDBOARD_SOUNDS_UPDATE: SoundboardSoundsData,
        DispatchEvent.GUILD_SOUNDBOARD_SOUND_CREATE: JSONObject,
        DispatchEvent.GUILD_SOUNDBOARD_SOUND_DELETE: GuildSoundboardSoundDeleteData,
        DispatchEvent.GUILD_SOUNDBOARD_SOUND_UPDATE: JSONObject,
        DispatchEvent.GUILD_STICKERS_UPDATE: GuildStickersUpdateData,
        DispatchEvent.GUILD_UPDATE: JSONObject,
        DispatchEvent.INTEGRATION_CREATE: JSONObject,
        DispatchEvent.INTEGRATION_DELETE: IntegrationDeleteData,
        DispatchEvent.INTEGRATION_UPDATE: JSONObject,
        DispatchEvent.INTERACTION_CREATE: JSONObject,
        DispatchEvent.INVITE_CREATE: InviteCreateData,
        DispatchEvent.INVITE_DELETE: InviteDeleteData,
        DispatchEvent.MESSAGE_CREATE: JSONObject,
        DispatchEvent.MESSAGE_DELETE: MessageDeleteData,
        DispatchEvent.MESSAGE_DELETE_BULK: MessageDeleteBulkData,
        DispatchEvent.MESSAGE_POLL_VOTE_ADD: MessagePollVoteData,
        DispatchEvent.MESSAGE_POLL_VOTE_REMOVE: MessagePollVoteData,
        DispatchEvent.MESSAGE_REACTION_ADD: MessageReactionAddData,
        DispatchEvent.MESSAGE_REACTION_REMOVE: MessageReactionRemoveData,
        DispatchEvent.MESSAGE_REACTION_REMOVE_ALL: MessageReactionRemoveAllData,
        DispatchEvent.MESSAGE_REACTION_REMOVE_EMOJI: MessageReactionRemoveEmojiData,
        DispatchEvent.MESSAGE_UPDATE: JSONObject,
        DispatchEvent.PRESENCE_UPDATE: PresenceUpdateEventData,
        DispatchEvent.READY: ReadyData,
        DispatchEvent.RESUMED: Any,
        DispatchEvent.SOUNDBOARD_SOUNDS: SoundboardSoundsData,
        DispatchEvent.STAGE_INSTANCE_CREATE: JSONObject,
        DispatchEvent.STAGE_INSTANCE_DELETE: JSONObject,
        DispatchEvent.STAGE_INSTANCE_UPDATE: JSONObject,
        DispatchEvent.SUBSCRIPTION_CREATE: JSONObject,
        DispatchEvent.SUBSCRIPTION_DELETE: JSONObject,
        DispatchEvent.SUBSCRIPTION_UPDATE: JSONObject,
        DispatchEvent.THREAD_CREATE: JSONObject,
        DispatchEvent.THREAD_DELETE: ThreadDeleteData,
        DispatchEvent.THREAD_LIST_SYNC: ThreadListSyncData,
        DispatchEvent.THREAD_MEMBERS_UPDATE: ThreadMembersUpdateData,
        DispatchEvent.THREAD_MEMBER_UPDATE: JSONObject,
        DispatchEvent.THREAD_UPDATE: JSONObject,
        DispatchEvent.TYPING_START: TypingStartData,
        DispatchEvent.USER_UPDATE: User,
        DispatchEvent.VOICE_CHANNEL_EFFECT_SEND: VoiceChannelEffectSendData,
        DispatchEvent.VOICE_SERVER_UPDATE: VoiceServerUpdateData,
        DispatchEvent.VOICE_STATE_UPDATE: JSONObject,
        DispatchEvent.WEBHOOKS_UPDATE: WebhooksUpdateData,
    }
)


def dispatch_data_type(name: str) -> Any:
    """Return the type a dispatch payload's ``d`` should be converted to.

    ``name`` is the payload's ``t`` field. Unknown events map to a raw JSON
    object so newer gateway events can still be carried through.
    """
    event = lookup_event(name)
    if event is None:
        _LOGGER.debug("no data type for [t:%s], using raw object", name)
        return JSONObject
    return DISPATCH_DATA_TYPES[event]
