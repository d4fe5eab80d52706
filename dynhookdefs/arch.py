"""Run-time access to architecture-specific register and call information."""

from __future__ import annotations

from typing import Any


class ArchOps:
    """Architecture operations.

    The base class only warns and returns neutral values. Subclass it and
    pass an instance to :func:`register_arch_ops` for a real architecture.
    """

    @staticmethod
    def _warn(name: str) -> None:
        print(f"WARNING: default impl of default_{name}, you need to register an ArchOps")

    def regname_to_regno(self, regname: str) -> int:
        """Map a register name to its number."""
        self._warn("regname_to_regno")
        return 0

    def regno_to_reg_name(self, regno: int) -> str | None:
        """Map a register number to its name."""
        self._warn("regno_to_reg_name")
        return None

    def argno_to_arg_value(self, argno: int) -> int:
        """Return the value of a call argument by position."""
        self._warn("argno_to_arg_value")
        return 0

    def get_current_pc(self, inst: Any) -> int:
        """Return the current program counter of an instance."""
        self._warn("get_current_pc")
        return 0

    def get_return_pc(self, inst: Any) -> int:
        """Return the return address of the current call in an instance."""
        self._warn("get_return_pc")
        return 0


_DEFAULT_OPS = ArchOps()
_installed: dict[str, ArchOps] = {"ops": _DEFAULT_OPS}


def register_arch_ops(ops: ArchOps) -> None:
    """Install the architecture operations used from now on."""
    _installed["ops"] = ops


def get_arch_ops() -> ArchOps:
    """Return the architecture operations currently installed."""
    return _installed["ops"]