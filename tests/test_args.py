import pytest

from dynhookdefs.args import HookDefArgs, init_hook_def_args, parse_hookdef_args
from dynhookdefs.hookdefs import HookDefHandlerInterface, HookDefRegistry


@pytest.fixture
def setup():
    registry = HookDefRegistry()
    intf = HookDefHandlerInterface()
    parse_req = init_hook_def_args(registry, intf)
    return registry, intf, parse_req


def test_registers_token(setup):
    registry, intf, parse_req = setup
    assert registry.parse_reqs == [parse_req]
    assert parse_req.token == "args"
    assert parse_req.nargs == 2
    assert parse_req.intf is intf


def test_literal_address(setup):
    registry, intf, _ = setup
    registry.parse_command(["args", "0x1000", "3"])
    assert [d.hook_data for d in registry.hook_defs] == [HookDefArgs(0x1000, 3)]
    assert registry.hook_defs[0].intf is intf


def test_uppercase_prefix(setup):
    registry, _, parse_req = setup
    parse_hookdef_args(registry, parse_req, ["0XAB", "1"])
    assert registry.hook_defs[0].hook_data == HookDefArgs(0xAB, 1)


def test_symbol_matches_all(setup):
    registry, _, parse_req = setup
    registry.add_sym("foo", 0x10)
    registry.add_sym("bar", 0x30)
    registry.add_sym("foo", 0x20)
    parse_hookdef_args(registry, parse_req, ["foo", "4"])
    assert [d.hook_data.addr for d in registry.hook_defs] == [0x10, 0x20]
    assert all(d.hook_data.nregs == 4 for d in registry.hook_defs)


def test_unknown_symbol_adds_nothing(setup):
    registry, _, parse_req = setup
    registry.add_sym("foobar", 0x10)
    parse_hookdef_args(registry, parse_req, ["foo", "4"])
    assert registry.hook_defs == []


def test_nregs_truncated_to_32_bits(setup):
    registry, _, parse_req = setup
    parse_hookdef_args(registry, parse_req, ["0x1", "4294967297"])
    parse_hookdef_args(registry, parse_req, ["0x2", "-1"])
    assert [d.hook_data.nregs for d in registry.hook_defs] == [1, 4294967295]


def test_describe_and_format(setup):
    registry, _, parse_req = setup
    parse_hookdef_args(registry, parse_req, ["0x1000", "3"])
    assert registry.hook_defs[0].hook_data.describe() == "args: addr 0x1000 nregs 3"
    assert registry.format_hook_defs() == "handler (nil) args: addr 0x1000 nregs 3\n"


def test_init_copies_template():
    registry = HookDefRegistry()
    first = init_hook_def_args(registry, HookDefHandlerInterface())
    second = init_hook_def_args(registry, None)
    assert first is not second
    assert first.intf is not None
    assert second.intf is None