"""The ``sym`` hook definition: names an address for later definitions."""

from __future__ import annotations

from typing import Optional

from .hookdefs import HookDefHandlerInterface, HookDefParseReq, HookDefRegistry
from .parse_utils import parse_hex


def parse_hookdef_sym(registry: HookDefRegistry, parse_req: HookDefParseReq, args: list[str]) -> None:
    """Add the symbol ``args[0]`` at hex address ``args[1]``."""
    registry.add_sym(args[0], parse_hex(args[1]))


SYM_PARSE_REQ = HookDefParseReq(
    token="sym",
    nargs=2,
    parse_func=parse_hookdef_sym,
    arg_desc="<name> <addr>",
)


def init_hook_def_sym(
    registry: HookDefRegistry, intf: Optional[HookDefHandlerInterface]
) -> HookDefParseReq:
    """Register a ``sym`` parser bound to ``intf`` and return it."""
    parse_req = SYM_PARSE_REQ.copy()
    parse_req.intf = intf
    registry.register_parse_handler(parse_req)
    return parse_req