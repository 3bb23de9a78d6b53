import pytest

from ramtypes.gateway import ALL_INTENTS, DEFAULT_INTENTS, PRIVILEGED_INTENTS, Intents

RESERVED_BITS = (17, 18, 19, 22, 23)


@pytest.mark.parametrize('intent', list(Intents))
def test_single_bit(intent: Intents) -> None:
    assert intent.value > 0
    assert intent.value & (intent.value - 1) == 0


WIRE_VALUES = [
    (Intents.GUILDS, 1 << 0),
    (Intents.GUILD_MEMBERS, 1 << 1),
    (Intents.GUILD_MODERATION, 1 << 2),
    (Intents.GUILD_BANS, 1 << 2),
    (Intents.GUILD_EXPRESSIONS, 1 << 3),
    (Intents.GUILD_EMOJIS_AND_STICKERS, 1 << 3),
    (Intents.GUILD_INTEGRATIONS, 1 << 4),
    (Intents.GUILD_WEBHOOKS, 1 << 5),
    (Intents.GUILD_INVITES, 1 << 6),
    (Intents.GUILD_VOICE_STATES, 1 << 7),
    (Intents.GUILD_PRESENCES, 1 << 8),
    (Intents.GUILD_MESSAGES, 1 << 9),
    (Intents.GUILD_MESSAGE_REACTIONS, 1 << 10),
    (Intents.GUILD_MESSAGE_TYPING, 1 << 11),
    (Intents.DIRECT_MESSAGES, 1 << 12),
    (Intents.DIRECT_MESSAGE_REACTIONS, 1 << 13),
    (Intents.DIRECT_MESSAGE_TYPING, 1 << 14),
    (Intents.MESSAGE_CONTENT, 1 << 15),
    (Intents.GUILD_SCHEDULED_EVENTS, 1 << 16),
    (Intents.AUTO_MODERATION_CONFIGURATION, 1 << 20),
    (Intents.AUTO_MODERATION_EXECUTION, 1 << 21),
    (Intents.GUILD_MESSAGE_POLLS, 1 << 24),
    (Intents.DIRECT_MESSAGE_POLLS, 1 << 25),
]


@pytest.mark.parametrize('intent,value', WIRE_VALUES)
def test_values(intent: Intents, value: int) -> None:
    assert int(intent) == value
    assert Intents(value) is intent


def test_every_intent_has_wire_value() -> None:
    assert set(Intents.__members__.values()) == {intent for intent, _ in WIRE_VALUES}


def test_deprecated_aliases() -> None:
    assert Intents.GUILD_BANS == Intents.GUILD_MODERATION
    assert Intents.GUILD_BANS is Intents.GUILD_MODERATION
    assert Intents.GUILD_EMOJIS_AND_STICKERS == Intents.GUILD_EXPRESSIONS
    assert Intents.GUILD_EMOJIS_AND_STICKERS is Intents.GUILD_EXPRESSIONS
    assert Intents['GUILD_BANS'] is Intents.GUILD_MODERATION


@pytest.mark.parametrize('bit', RESERVED_BITS)
def test_reserved_bits_unset(bit: int) -> None:
    assert all(not member.value & (1 << bit) for member in Intents.__members__.values())
    assert not ALL_INTENTS & (1 << bit)


def test_union() -> None:
    intents = Intents.GUILDS | Intents.GUILD_MESSAGES | Intents.MESSAGE_CONTENT

    assert isinstance(intents, Intents)
    assert int(intents) == 1 | (1 << 9) | (1 << 15)
    assert Intents.GUILD_MESSAGES in intents
    assert Intents.DIRECT_MESSAGES not in intents


def test_composites() -> None:
    assert int(PRIVILEGED_INTENTS) == (1 << 1) | (1 << 8) | (1 << 15)
    assert int(ALL_INTENTS) == sum(1 << bit for bit in range(26) if bit not in RESERVED_BITS)
    assert DEFAULT_INTENTS | PRIVILEGED_INTENTS == ALL_INTENTS
    assert not DEFAULT_INTENTS & PRIVILEGED_INTENTS
