"""The ``regaddr`` hook definition: dump memory pointed to by a register."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .arch import get_arch_ops
from .hookdefs import HookDef, HookDefHandlerInterface, HookDefParseReq, HookDefRegistry
from .parse_utils import parse_decimal


@dataclass
class HookDefRegAddr:
    """At ``addr``, read ``size`` bytes from the address held in register ``regno``."""

    addr: int
    regno: int
    size: int

    def describe(self) -> str:
        """One-line description of this definition."""
        return f"regaddr: addr 0x{self.addr:x} regno {self.regno} size {self.size}"


def _describe(hook_def: HookDef) -> str:
    return hook_def.hook_data.describe()


def parse_hookdef_regaddr(registry: HookDefRegistry, parse_req: HookDefParseReq, args: list[str]) -> None:
    """Parse ``<addr|sym> <reg> <size>`` into one definition per resolved address."""
    regno = get_arch_ops().regname_to_regno(args[1])
    size = parse_decimal(args[2])
    for addr in registry.resolve_addresses(args[0]):
        registry.new_hook_def(parse_req, HookDefRegAddr(addr=addr, regno=regno, size=size))


REGADDR_PARSE_REQ = HookDefParseReq(
    token="regaddr",
    nargs=3,
    parse_func=parse_hookdef_regaddr,
    arg_desc="<addr|sym> <reg> <size>",
    describe=_describe,
)


def init_hook_def_regaddr(
    registry: HookDefRegistry, intf: Optional[HookDefHandlerInterface]
) -> HookDefParseReq:
    """Register a ``regaddr`` parser bound to ``intf`` and return it."""
    parse_req = REGADDR_PARSE_REQ.copy()
    parse_req.intf = intf
    registry.register_parse_handler(parse_req)
    return parse_req