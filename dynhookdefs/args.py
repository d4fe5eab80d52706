"""The ``args`` hook definition: capture call arguments at an address."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .hookdefs import HookDef, HookDefHandlerInterface, HookDefParseReq, HookDefRegistry
from .parse_utils import parse_decimal

_UINT32_MASK = 0xFFFFFFFF


@dataclass
class HookDefArgs:
    """Capture ``nregs`` arguments when execution reaches ``addr``."""

    addr: int
    nregs: int

    def describe(self) -> str:
        """One-line description of this definition."""
        return f"args: addr 0x{self.addr:x} nregs {self.nregs}"


def _describe(hook_def: HookDef) -> str:
    return hook_def.hook_data.describe()


def parse_hookdef_args(registry: HookDefRegistry, parse_req: HookDefParseReq, args: list[str]) -> None:
    """Parse ``<addr|sym> <num-regs>`` into one definition per resolved address."""
    nregs = parse_decimal(args[1]) & _UINT32_MASK
    for addr in registry.resolve_addresses(args[0]):
        registry.new_hook_def(parse_req, HookDefArgs(addr=addr, nregs=nregs))


ARGS_PARSE_REQ = HookDefParseReq(
    token="args",
    nargs=2,
    parse_func=parse_hookdef_args,
    arg_desc="<addr|sym> <num-regs>",
    describe=_describe,
)


def init_hook_def_args(
    registry: HookDefRegistry, intf: Optional[HookDefHandlerInterface]
) -> HookDefParseReq:
    """Register an ``args`` parser bound to ``intf`` and return it."""
    parse_req = ARGS_PARSE_REQ.copy()
    parse_req.intf = intf
    registry.register_parse_handler(parse_req)
    return parse_req