from __future__ import annotations

import functools
import operator
import typing
from collections.abc import Sequence
from enum import IntFlag
from typing import Final

__all__: Sequence[str] = ("ALL_INTENTS", "DEFAULT_INTENTS", "PRIVILEGED_INTENTS", "Intents")


@typing.final
class Intents(IntFlag):
    GUILDS = 1 << 0
    GUILD_MEMBERS = 1 << 1
    GUILD_MODERATION = 1 << 2
    GUILD_EXPRESSIONS = 1 << 3
    GUILD_INTEGRATIONS = 1 << 4
    GUILD_WEBHOOKS = 1 << 5
    GUILD_INVITES = 1 << 6
    GUILD_VOICE_STATES = 1 << 7
    GUILD_PRESENCES = 1 << 8
    GUILD_MESSAGES = 1 << 9
    GUILD_MESSAGE_REACTIONS = 1 << 10
    GUILD_MESSAGE_TYPING = 1 << 11
    DIRECT_MESSAGES = 1 << 12
    DIRECT_MESSAGE_REACTIONS = 1 << 13
    DIRECT_MESSAGE_TYPING = 1 << 14
    MESSAGE_CONTENT = 1 << 15
    GUILD_SCHEDULED_EVENTS = 1 << 16
    # bits 17-19 are reserved
    AUTO_MODERATION_CONFIGURATION = 1 << 20
    AUTO_MODERATION_EXECUTION = 1 << 21
    # bits 22-23 are reserved
    GUILD_MESSAGE_POLLS = 1 << 24
    DIRECT_MESSAGE_POLLS = 1 << 25

    # Deprecated names, kept as aliases of their replacements.
    GUILD_BANS = GUILD_MODERATION
    GUILD_EMOJIS_AND_STICKERS = GUILD_EXPRESSIONS


PRIVILEGED_INTENTS: Final[Intents] = Intents.GUILD_MEMBERS | Intents.GUILD_PRESENCES | Intents.MESSAGE_CONTENT

ALL_INTENTS: Final[Intents] = functools.reduce(operator.or_, Intents)

DEFAULT_INTENTS: Final[Intents] = ALL_INTENTS & ~PRIVILEGED_INTENTS
