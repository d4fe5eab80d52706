"""Registry of hook definition parsers, parsed hook definitions and symbols."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from .parse_utils import parse_hex


@dataclass(eq=False)
class HookDefHandlerInterface:
    """Callbacks an engine attaches to the hook definitions of one kind."""

    destroy: Optional[Callable[["HookDef"], None]] = None
    enable: Optional[Callable[["HookDef"], None]] = None
    handler_func: Optional[Callable[..., Any]] = None


ParseFunc = Callable[["HookDefRegistry", "HookDefParseReq", list], None]


@dataclass
class HookDefParseReq:
    """How one command token is parsed into hook definitions."""

    token: str
    nargs: int
    parse_func: Optional[ParseFunc] = None
    arg_desc: str = ""
    describe: Optional[Callable[["HookDef"], str]] = None
    intf: Optional[HookDefHandlerInterface] = None

    def copy(self) -> "HookDefParseReq":
        """Return an independent copy sharing the same callbacks."""
        return dataclasses.replace(self)


@dataclass(eq=False)
class HookDef:
    """One parsed hook definition."""

    parse_req: HookDefParseReq
    hook_data: Any = None
    handler: Any = None
    intf: Optional[HookDefHandlerInterface] = None


@dataclass
class SymData:
    """A named address."""

    name: str
    addr: int


def _format_handler(handler: Any) -> str:
    if handler is None:
        return "(nil)"
    return getattr(handler, "__name__", repr(handler))


@dataclass
class HookDefRegistry:
    """Holds the parse requests, the hook definitions and the symbol table."""

    parse_reqs: list[HookDefParseReq] = field(default_factory=list)
    hook_defs: list[HookDef] = field(default_factory=list)
    syms: list[SymData] = field(default_factory=list)

    def register_parse_handler(self, parse_req: HookDefParseReq) -> None:
        """Add a parse request; earlier ones win on equal tokens."""
        self.parse_reqs.append(parse_req)

    def new_hook_def(self, parse_req: HookDefParseReq, hook_data: Any) -> HookDef:
        """Create a hook definition for ``parse_req`` and append it."""
        if parse_req is None:
            raise ValueError("hook def parse request is missing")
        hook_def = HookDef(parse_req=parse_req, hook_data=hook_data, intf=parse_req.intf)
        self.hook_defs.append(hook_def)
        return hook_def

    def _find_parse_req(self, word: str) -> Optional[HookDefParseReq]:
        lowered = word.lower()
        return next((req for req in self.parse_reqs if req.token.lower() == lowered), None)

    def parse_command(self, args: Iterable[str]) -> None:
        """Parse a sequence of ``<token> <args...>`` groups.

        Unknown tokens are reported and skipped; a token short of arguments
        is reported and ends parsing. The final word is never read as a token.
        """
        args = list(args)
        index = 0
        while index < len(args) - 1:
            word = args[index]
            index += 1
            parse_req = self._find_parse_req(word)
            if parse_req is None:
                print(f"invalid hook type {word}", flush=True)
                continue
            if parse_req.nargs + index > len(args):
                print(f"not enough args to parse {word}", flush=True)
                break
            if parse_req.parse_func is not None:
                parse_req.parse_func(self, parse_req, args[index:index + parse_req.nargs])
            index += parse_req.nargs

    def format_parse_reqs(self) -> str:
        """One ``token: arg_desc`` line per parse request."""
        return "".join(f"{req.token}: {req.arg_desc}\n" for req in self.parse_reqs)

    def format_hook_defs(self) -> str:
        """Describe every hook definition in order."""
        parts = []
        for hook_def in self.hook_defs:
            parts.append(f"handler {_format_handler(hook_def.handler)} ")
            describe = hook_def.parse_req.describe
            if describe is not None:
                parts.append(describe(hook_def) + "\n")
        return "".join(parts)

    def add_sym(self, name: str, addr: int) -> SymData:
        """Append a symbol and return it."""
        sym = SymData(name=name, addr=addr)
        self.syms.append(sym)
        return sym

    def format_syms(self) -> str:
        """One ``name @ 0xaddr`` line per symbol."""
        return "".join(f"{sym.name} @ 0x{sym.addr:x}\n" for sym in self.syms)

    def resolve_addresses(self, spec: str) -> list[int]:
        """Turn ``<addr|sym>`` into addresses.

        A ``0x`` prefix means a literal address; otherwise every symbol with
        exactly that name contributes its address, in table order.
        """
        if spec[:2].lower() == "0x":
            return [parse_hex(spec)]
        return [sym.addr for sym in self.syms if sym.name == spec]