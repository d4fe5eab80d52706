from dynhookdefs.hookdefs import HookDefHandlerInterface, HookDefRegistry, SymData
from dynhookdefs.syms import SYM_PARSE_REQ, init_hook_def_sym, parse_hookdef_sym


def test_init_registers_sym_request():
    registry = HookDefRegistry()
    intf = HookDefHandlerInterface()
    req = init_hook_def_sym(registry, intf)
    assert registry.parse_reqs == [req]
    assert req.token == "sym"
    assert req.nargs == 2
    assert req.intf is intf
    assert registry.format_parse_reqs() == "sym: <name> <addr>\n"


def test_init_leaves_template_untouched():
    intf = HookDefHandlerInterface()
    req = init_hook_def_sym(HookDefRegistry(), intf)
    assert req.intf is intf
    assert req.token == SYM_PARSE_REQ.token
    assert SYM_PARSE_REQ.intf is None


def test_parse_hookdef_sym_adds_symbol():
    registry = HookDefRegistry()
    parse_hookdef_sym(registry, SYM_PARSE_REQ, ["main", "0x401000"])
    assert registry.syms == [SymData("main", 0x401000)]


def test_parse_hookdef_sym_accepts_bare_hex():
    registry = HookDefRegistry()
    parse_hookdef_sym(registry, SYM_PARSE_REQ, ["f", "ff"])
    assert registry.syms[0].addr == 0xFF


def test_command_line_defines_symbols_in_order():
    registry = HookDefRegistry()
    init_hook_def_sym(registry, HookDefHandlerInterface())
    registry.parse_command(["sym", "main", "0x401000", "SYM", "exit", "0x402000"])
    assert [s.name for s in registry.syms] == ["main", "exit"]
    assert registry.format_syms() == "main @ 0x401000\nexit @ 0x402000\n"
    assert registry.resolve_addresses("exit") == [0x402000]


def test_sym_creates_no_hook_defs():
    registry = HookDefRegistry()
    init_hook_def_sym(registry, None)
    registry.parse_command(["sym", "a", "0x1"])
    assert registry.hook_defs == []
    assert len(registry.syms) == 1