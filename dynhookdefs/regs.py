"""The ``regs`` hook definition: capture a chosen set of registers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .arch import get_arch_ops
from .hookdefs import HookDef, HookDefHandlerInterface, HookDefParseReq, HookDefRegistry
from .parse_utils import replace_char, split_args


@dataclass
class RegEntry:
    """A register name and its architecture number."""

    regname: str
    regno: int


@dataclass
class HookDefRegs:
    """Capture the listed registers when execution reaches ``addr``."""

    addr: int
    regentries: list[RegEntry] = field(default_factory=list)

    def describe(self) -> str:
        """One-line description of this definition."""
        regs = "".join(f"{entry.regname}: {entry.regno} " for entry in self.regentries)
        return f"regs: addr 0x{self.addr:x} {regs}"


def _describe(hook_def: HookDef) -> str:
    return hook_def.hook_data.describe()


def parse_reglist(names: Iterable[str]) -> list[RegEntry]:
    """Look up each register name with the installed architecture operations."""
    arch_ops = get_arch_ops()
    return [RegEntry(regname=name, regno=arch_ops.regname_to_regno(name)) for name in names]


def parse_hookdef_regs(registry: HookDefRegistry, parse_req: HookDefParseReq, args: list[str]) -> None:
    """Parse ``<addr|sym> <comma-separated-reglist>`` into one definition per address."""
    names = split_args(replace_char(args[1], ",", " "))
    for addr in registry.resolve_addresses(args[0]):
        registry.new_hook_def(parse_req, HookDefRegs(addr=addr, regentries=parse_reglist(names)))


REGS_PARSE_REQ = HookDefParseReq(
    token="regs",
    nargs=2,
    parse_func=parse_hookdef_regs,
    arg_desc="<addr|sym> <comma-separated-reglist>",
    describe=_describe,
)


def init_hook_def_regs(
    registry: HookDefRegistry, intf: Optional[HookDefHandlerInterface]
) -> HookDefParseReq:
    """Register a ``regs`` parser bound to ``intf`` and return it."""
    parse_req = REGS_PARSE_REQ.copy()
    parse_req.intf = intf
    registry.register_parse_handler(parse_req)
    return parse_req