from __future__ import annotations

import logging
import typing
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final

__all__: Sequence[str] = ("CloseCode", "OpCode", "lookup_close_code", "lookup_opcode", "should_reconnect")

_LOGGER: logging.Logger = logging.getLogger("ram.gateway.codes")

_CLOSE_CODE_BASE: Final[int] = 4000


@typing.final
class OpCode(int, Enum):
    DISPATCH = 0
    HEARTBEAT = 1
    IDENTIFY = 2
    PRESENCE_UPDATE = 3
    VOICE_STATE_UPDATE = 4
    # 5 is unused
    RESUME = 6
    RECONNECT = 7
    REQUEST_GUILD_MEMBERS = 8
    INVALID_SESSION = 9
    HELLO = 10
    HEARTBEAT_ACK = 11
    REQUEST_SOUNDBOARD_SOUNDS = 31


@typing.final
class CloseCode(int, Enum):
    UNKNOWN_ERROR = _CLOSE_CODE_BASE + 0
    UNKNOWN_OPCODE = _CLOSE_CODE_BASE + 1
    DECODE_ERROR = _CLOSE_CODE_BASE + 2
    NOT_AUTHENTICATED = _CLOSE_CODE_BASE + 3
    AUTHENTICATION_FAILED = _CLOSE_CODE_BASE + 4
    ALREADY_AUTHENTICATED = _CLOSE_CODE_BASE + 5
    # 4006 is reserved
    INVALID_SEQ = _CLOSE_CODE_BASE + 7
    RATE_LIMITED = _CLOSE_CODE_BASE + 8
    SESSION_TIMED_OUT = _CLOSE_CODE_BASE + 9
    INVALID_SHARD = _CLOSE_CODE_BASE + 10
    SHARDING_REQUIRED = _CLOSE_CODE_BASE + 11
    INVALID_API_VERSION = _CLOSE_CODE_BASE + 12
    INVALID_INTENTS = _CLOSE_CODE_BASE + 13
    DISALLOWED_INTENTS = _CLOSE_CODE_BASE + 14


# https://discord.com/developers/docs/topics/opcodes-and-status-codes#gateway-gateway-close-event-codes
_RECONNECT_CLOSE_CODES: Final[Mapping[CloseCode, bool]] = {
    CloseCode.UNKNOWN_ERROR: True,
    CloseCode.UNKNOWN_OPCODE: True,
    CloseCode.DECODE_ERROR: True,
    CloseCode.NOT_AUTHENTICATED: True,
    CloseCode.AUTHENTICATION_FAILED: False,
    CloseCode.ALREADY_AUTHENTICATED: True,
    CloseCode.INVALID_SEQ: True,
    CloseCode.RATE_LIMITED: True,
    CloseCode.SESSION_TIMED_OUT: True,
    CloseCode.INVALID_SHARD: False,
    CloseCode.SHARDING_REQUIRED: False,
    CloseCode.INVALID_API_VERSION: False,
    CloseCode.INVALID_INTENTS: False,
    CloseCode.DISALLOWED_INTENTS: False,
}


def lookup_opcode(value: int) -> OpCode | None:
    """Return the catalogued opcode for ``value``, or None if it is unknown."""
    try:
        return OpCode(value)
    except ValueError:
        _LOGGER.debug("unknown op code [%s]", value)
        return None


def lookup_close_code(value: int) -> CloseCode | None:
    """Return the catalogued close code for ``value``, or None if it is unknown."""
    try:
        return CloseCode(value)
    except ValueError:
        _LOGGER.debug("unknown close code [%s]", value)
        return None


def should_reconnect(code: int | None) -> bool:
    """Whether the Discord docs allow reconnecting after ``code``.

    None, plain WebSocket close codes and close codes missing from the
    catalog all return True; only the codes Discord documents as fatal
    return False.
    """
    if code is None:
        return True

    close_code = lookup_close_code(code)
    if close_code is None:
        return True

    return _RECONNECT_CLOSE_CODES[close_code]
