# dynhookdefs

`dynhookdefs` reads hook definitions given as command-line words and turns
them into a list of hook descriptors that an instrumentation or emulation
engine can act on. A hook names its target either by a hex address
(anything starting with `0x` or `0X`) or by a symbol declared earlier with
`sym`.

## Installing

```
pip install .
```

## Command line

```
dynhookdefs sym main 0x401000 args main 3 regs 0x402000 rax,rbx allregs main
```

The command prints the hook types it knows (`parse reqs`), parses its
arguments, then prints the symbols it collected (`syms:`) and the hook
definitions it built (`hook defs:`). It always exits with status 0.

Hook types, matched case-insensitively on the whole word:

| token     | arguments                                  |
|-----------|--------------------------------------------|
| `sym`     | `<name> <addr>`                            |
| `args`    | `<addr\|sym> <num-regs>`                    |
| `regaddr` | `<addr\|sym> <reg> <size>`                  |
| `regs`    | `<addr\|sym> <comma-separated-reglist>`     |
| `allregs` | `<addr\|sym>`                               |

Parsing rules:

- An unknown token prints `invalid hook type <word>` and is skipped.
- A token without enough words after it prints
  `not enough args to parse <word>` and ends parsing.
- The last word is never read as a token.
- A symbol reference creates one hook for every symbol declared under
  exactly that name, in declaration order; a name with no symbol creates
  nothing.
- Numbers are read leniently: addresses as hex, counts and sizes as decimal,
  stopping at the first character that is not a digit (no digits give 0).

## Library use

```python
from dynhookdefs.cli import build_registry

registry = build_registry()
registry.parse_command(["sym", "main", "0x401000", "args", "main", "2"])
print(registry.format_syms(), end="")       # main @ 0x401000
print(registry.format_hook_defs(), end="")  # handler (nil) args: addr 0x401000 nregs 2
```

`HookDefRegistry` (in `dynhookdefs.hookdefs`) keeps three lists:
`parse_reqs`, `hook_defs` and `syms`. Each entry of `hook_defs` is a
`HookDef` whose `hook_data` is one of `HookDefArgs`, `HookDefRegAddr`,
`HookDefRegs` or `HookDefAllRegs`, each with a `describe()` method.

To add a hook type of your own, build a `HookDefParseReq` with a token, an
argument count and a `parse_func(registry, parse_req, args)`, and pass it to
`HookDefRegistry.register_parse_handler`. `HookDefRegistry.resolve_addresses`
turns an `<addr|sym>` word into addresses.

### Architecture operations

Register names (for `regaddr` and `regs`) are turned into numbers through the
installed `ArchOps` object. The default one prints a warning and returns 0;
install your own with `dynhookdefs.arch.register_arch_ops`:

```python
from dynhookdefs.arch import ArchOps, register_arch_ops

class X86_64(ArchOps):
    _REGS = ["rax", "rbx", "rcx", "rdx"]

    def regname_to_regno(self, regname):
        return self._REGS.index(regname)

    def regno_to_reg_name(self, regno):
        return self._REGS[regno]

register_arch_ops(X86_64())
```

## What it does not do

The package only builds descriptors. It does not place hooks, run or attach
to any program, or call the `destroy`, `enable` and `handler_func` callbacks
of a `HookDefHandlerInterface`; that is left to the engine that uses the
registry. It has no hook type for dumping memory at a fixed address, and it
ships no architecture description beyond the warning-only default `ArchOps`.

## Running the tests

```
pip install .[test]
pytest
```