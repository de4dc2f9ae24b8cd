"""TuyaDeviceManager / TuyaUserManager tests."""

import json

import pytest
from tuya_iot.devices import serialize_commands
from tuya_iot.exceptions import InvalidArgumentError, TuyaErrorCodes
from tuya_iot.memory import InMemoryTransport
from tuya_iot.models import (
    Command,
    Device,
    DeviceInfo,
    DeviceStatus,
    StaticAccessToken,
    User,
)
from tuya_iot.tuya_client import TuyaClient

TOKEN = StaticAccessToken("tok")


def make_client() -> tuple[TuyaClient, InMemoryTransport]:
    transport = InMemoryTransport()
    return TuyaClient(transport=transport), transport


@pytest.mark.parametrize(
    ("call", "method", "path"),
    [
        (lambda c: c.devices.get_device("d1", TOKEN), "GET", "/v1.0/devices/d1"),
        (lambda c: c.devices.get_device_info("d1", TOKEN), "GET", "/v1.1/iot-03/devices/d1"),
        (lambda c: c.devices.get_device_status("d1", TOKEN), "GET", "/v1.0/devices/d1/status"),
        (lambda c: c.devices.get_devices_by_user("u1", TOKEN), "GET", "/v1.0/users/u1/devices"),
        (
            lambda c: c.devices.get_device_instructions("d1", TOKEN),
            "GET",
            "/v1.0/devices/d1/functions",
        ),
        (
            lambda c: c.devices.send_commands("d1", [Command("switch_1", True)], TOKEN),
            "POST",
            "/v1.0/devices/d1/commands",
        ),
        (lambda c: c.users.get_user("u1", TOKEN), "GET", "/v1.0/users/u1/infos"),
    ],
)
async def test_operation_routes(call, method: str, path: str) -> None:
    client, transport = make_client()
    await call(client)
    assert transport.request_count == 1
    request = transport.requests[0]
    assert request.method == method
    assert request.path == path
    assert request.access_token == "tok"


async def test_get_device_parses_record() -> None:
    client, transport = make_client()
    transport.set_result(
        "GET",
        "/v1.0/devices/d1",
        {
            "id": "d1",
            "name": "Desk lamp",
            "category": "dj",
            "online": True,
            "status": [{"code": "switch_led", "value": True}],
            "unknown_field": 1,
        },
    )
    device = await client.devices.get_device("d1", TOKEN)
    assert isinstance(device, Device)
    assert device.online is True
    assert device.status == [DeviceStatus(code="switch_led", value=True)]


async def test_get_device_info_accepts_identifiable() -> None:
    client, transport = make_client()
    transport.set_result("GET", "/v1.1/iot-03/devices/d1", {"id": "d1", "is_online": True})
    info = await client.devices.get_device_info(DeviceInfo(id="d1"), TOKEN)
    assert info is not None
    assert info.online is True


async def test_get_device_status_list() -> None:
    client, transport = make_client()
    transport.set_result(
        "GET",
        "/v1.0/devices/d1/status",
        [{"code": "switch_1", "value": False}, {"code": "countdown_1", "value": 0}],
    )
    status = await client.devices.get_device_status(DeviceInfo(id="d1"), TOKEN)
    assert [s.code for s in status] == ["switch_1", "countdown_1"]


async def test_get_devices_by_user_object() -> None:
    client, transport = make_client()
    transport.set_result("GET", "/v1.0/users/u1/devices", [{"id": "d1"}, {"id": "d2"}])
    devices = await client.devices.get_devices_by_user(User(id="u1"), TOKEN)
    assert [d.id for d in devices] == ["d1", "d2"]


async def test_get_device_instructions_decodes_values() -> None:
    client, transport = make_client()
    transport.set_result(
        "GET",
        "/v1.0/devices/d1/functions",
        {
            "category": "kg",
            "functions": [
                {"code": "switch_1", "type": "Boolean", "values": "{}", "name": "Switch"},
                {
                    "code": "countdown_1",
                    "type": "Integer",
                    "values": '{"unit":"s","min":0,"max":86400,"scale":0,"step":1}',
                },
            ],
        },
    )
    info = await client.devices.get_device_instructions("d1", TOKEN)
    assert info is not None
    assert info.category == "kg"
    assert info.functions[0].values == {}
    assert info.functions[1].values["max"] == 86400


async def test_get_user_parses_uid() -> None:
    client, transport = make_client()
    transport.set_result("GET", "/v1.0/users/u1/infos", {"uid": "u1", "nick_name": "kim"})
    user = await client.users.get_user("u1", TOKEN)
    assert user == User(id="u1", nick_name="kim")


async def test_read_returns_none_when_absent() -> None:
    client, _ = make_client()
    assert await client.devices.get_device("missing", TOKEN) is None


async def test_send_commands_body() -> None:
    client, transport = make_client()
    transport.set_result("POST", "/v1.0/devices/d1/commands", True)
    ok = await client.devices.send_commands(
        "d1", [Command("switch_1", True), Command("countdown_1", 60)], TOKEN
    )
    assert ok is True
    body = json.loads(transport.requests[0].payload)
    assert body == {
        "commands": [
            {"code": "switch_1", "value": True},
            {"code": "countdown_1", "value": 60},
        ]
    }


async def test_send_commands_false_when_no_result() -> None:
    client, _ = make_client()
    assert await client.devices.send_commands("d1", [Command("switch_1", True)], TOKEN) is False


async def test_single_and_batch_send_bodies_identical() -> None:
    client, transport = make_client()
    command = Command("switch_1", True)
    await client.devices.send_command("d1", command, TOKEN)
    await client.devices.send_commands("d1", [command], TOKEN)
    single, batch = transport.requests
    assert single.payload == batch.payload
    assert single.path == batch.path
    assert single.payload == serialize_commands([command])


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.devices.get_device(None, TOKEN),
        lambda c: c.devices.get_device("", TOKEN),
        lambda c: c.devices.get_device_status(DeviceInfo(id=None), TOKEN),
        lambda c: c.devices.get_device_instructions(DeviceInfo(id=""), TOKEN),
        lambda c: c.devices.get_devices_by_user(User(id=None), TOKEN),
        lambda c: c.devices.send_command(DeviceInfo(id=None), Command("switch_1", True), TOKEN),
        lambda c: c.devices.send_commands(Device(id=None), [Command("switch_1", True)], TOKEN),
        lambda c: c.devices.send_commands("d1", [], TOKEN),
        lambda c: c.devices.send_commands("d1", [None], TOKEN),
        lambda c: c.users.get_user(None, TOKEN),
    ],
)
async def test_invalid_argument_makes_no_call(call) -> None:
    client, transport = make_client()
    with pytest.raises(InvalidArgumentError) as exc_info:
        await call(client)
    assert exc_info.value.code == TuyaErrorCodes.INVALID_ARGUMENT
    assert transport.request_count == 0


async def test_invalid_argument_checked_before_credential() -> None:
    client, transport = make_client()
    with pytest.raises(InvalidArgumentError):
        await client.devices.get_device_status(DeviceInfo(id=None))
    assert transport.request_count == 0


def test_invalid_argument_is_value_error() -> None:
    assert issubclass(InvalidArgumentError, ValueError)
