import logging
from typing import Any

import msgspec
import pytest
from msgspec import convert, json

from ramtypes import JSONObject, User
from ramtypes.gateway import (
    DISPATCH_DATA_TYPES,
    Dispatch,
    DispatchEvent,
    GuildBanData,
    MessageDeleteData,
    MessageReactionAddData,
    ReadyData,
    ReceivablePayload,
    ShardInfo,
    TypingStartData,
    VoiceServerUpdateData,
    dispatch_data_type,
)

READY = b'''{
    "op": 0,
    "t": "READY",
    "s": 1,
    "d": {
        "v": 10,
        "user": {"id": "80351110224678912", "username": "nelly", "discriminator": "0", "bot": true},
        "guilds": [{"id": "41771983423143937", "unavailable": true}],
        "session_id": "5a1d4c6f",
        "resume_gateway_url": "wss://gateway-us-east1-b.discord.gg",
        "shard": [0, 1],
        "application": {"id": "80351110224678912", "flags": 0}
    }
}'''


def decode_data(raw: bytes) -> Any:
    payload = json.decode(raw, type=ReceivablePayload)
    assert isinstance(payload, Dispatch)
    return convert(payload.d, type=dispatch_data_type(payload.t), strict=False)


def test_ready() -> None:
    data = decode_data(READY)

    assert isinstance(data, ReadyData)
    assert data.v == 10
    assert data.user == User(id=80351110224678912, username='nelly', discriminator='0', bot=True)
    assert data.shard == ShardInfo(0, 1)
    assert data.guilds == [{'id': '41771983423143937', 'unavailable': True}]


def test_message_delete_without_guild() -> None:
    data = decode_data(b'{"op":0,"t":"MESSAGE_DELETE","s":2,"d":{"id":"3","channel_id":"2"}}')

    assert data == MessageDeleteData(id=3, channel_id=2)
    assert data.guild_id is None


def test_guild_ban_add() -> None:
    data = decode_data(
        b'{"op":0,"t":"GUILD_BAN_ADD","s":5,'
        b'"d":{"guild_id":"1","user":{"id":"2","username":"spam"}}}'
    )

    assert data == GuildBanData(guild_id=1, user=User(id=2, username='spam'))


def test_message_reaction_add() -> None:
    data = decode_data(
        b'{"op":0,"t":"MESSAGE_REACTION_ADD","s":7,"d":{'
        b'"user_id":"1","channel_id":"2","message_id":"3","guild_id":"4",'
        b'"emoji":{"id":null,"name":"\\u2764"},"burst":false,"type":0}}'
    )

    assert isinstance(data, MessageReactionAddData)
    assert data.emoji == {'id': None, 'name': '❤'}
    assert data.guild_id == 4
    assert data.member is None


def test_typing_start() -> None:
    data = decode_data(
        b'{"op":0,"t":"TYPING_START","s":9,'
        b'"d":{"channel_id":"2","user_id":"1","timestamp":1700000000}}'
    )

    assert data == TypingStartData(channel_id=2, user_id=1, timestamp=1700000000)


def test_voice_server_update_null_endpoint() -> None:
    data = decode_data(
        b'{"op":0,"t":"VOICE_SERVER_UPDATE","s":3,"d":{"token":"t","guild_id":"1","endpoint":null}}'
    )

    assert data == VoiceServerUpdateData(token='t', guild_id=1, endpoint=None)


def test_missing_required_field() -> None:
    with pytest.raises(msgspec.ValidationError):
        decode_data(b'{"op":0,"t":"MESSAGE_DELETE","s":2,"d":{"id":"3"}}')


def test_full_object_events_stay_raw() -> None:
    data = decode_data(b'{"op":0,"t":"MESSAGE_CREATE","s":4,"d":{"id":"1","content":"hi"}}')

    assert data == {'id': '1', 'content': 'hi'}


def test_unknown_event_stays_raw(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger='ram.gateway'):
        assert dispatch_data_type('SOME_FUTURE_EVENT') is JSONObject

    assert 'SOME_FUTURE_EVENT' in caplog.text


@pytest.mark.parametrize('event', list(DispatchEvent))
def test_data_type_lookup_by_name(event: DispatchEvent) -> None:
    assert dispatch_data_type(event.value) is DISPATCH_DATA_TYPES[event]


def test_dispatch_names_exported() -> None:
    from ramtypes import gateway
    from ramtypes.gateway import _dispatch

    for name in _dispatch.__all__:
        assert name in gateway.__all__
        assert getattr(gateway, name) is getattr(_dispatch, name)
