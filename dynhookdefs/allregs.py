"""The ``allregs`` hook definition: capture every register at an address."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .hookdefs import HookDef, HookDefHandlerInterface, HookDefParseReq, HookDefRegistry


@dataclass
class HookDefAllRegs:
    """Capture all registers when execution reaches ``addr``."""

    addr: int

    def describe(self) -> str:
        """One-line description of this definition."""
        return f"allregs: addr 0x{self.addr:x}"


def _describe(hook_def: HookDef) -> str:
    return hook_def.hook_data.describe()


def parse_hookdef_allregs(registry: HookDefRegistry, parse_req: HookDefParseReq, args: list[str]) -> None:
    """Parse ``<addr|sym>`` into one definition per resolved address."""
    for addr in registry.resolve_addresses(args[0]):
        registry.new_hook_def(parse_req, HookDefAllRegs(addr=addr))


ALLREGS_PARSE_REQ = HookDefParseReq(
    token="allregs",
    nargs=1,
    parse_func=parse_hookdef_allregs,
    arg_desc="<addr|sym>",
    describe=_describe,
)


def init_hook_def_allregs(
    registry: HookDefRegistry, intf: Optional[HookDefHandlerInterface]
) -> HookDefParseReq:
    """Register an ``allregs`` parser bound to ``intf`` and return it."""
    parse_req = ALLREGS_PARSE_REQ.copy()
    parse_req.intf = intf
    registry.register_parse_handler(parse_req)
    return parse_req