"""Command line front end: parse hook definitions and print what was understood."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .allregs import init_hook_def_allregs
from .args import init_hook_def_args
from .hookdefs import HookDefHandlerInterface, HookDefRegistry
from .regaddr import init_hook_def_regaddr
from .regs import init_hook_def_regs
from .syms import init_hook_def_sym


def build_registry() -> HookDefRegistry:
    """Create a registry with every built-in hook definition kind registered."""
    registry = HookDefRegistry()
    init_hook_def_sym(registry, HookDefHandlerInterface())
    init_hook_def_args(registry, HookDefHandlerInterface())
    init_hook_def_regaddr(registry, HookDefHandlerInterface())
    init_hook_def_regs(registry, HookDefHandlerInterface())
    init_hook_def_allregs(registry, HookDefHandlerInterface())
    return registry


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse hook definitions from ``argv`` and print parsers, symbols and definitions."""
    if argv is None:
        argv = sys.argv[1:]
    registry = build_registry()
    print("parse reqs")
    print(registry.format_parse_reqs())
    registry.parse_command(argv)
    print("syms:")
    print(registry.format_syms())
    print("hook defs:")
    print(registry.format_hook_defs())
    return 0


if __name__ == "__main__":
    sys.exit(main())