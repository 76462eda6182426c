"""
Register entry definition.

A register entry ties a DWARF register number to the name tooling displays
for it, within one architecture. Entries are immutable.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Register:
    """
    One row of an architecture's register table.

    Attributes:
        symbol: Upper-case constant name (e.g. "RSP", "FS_BASE")
        number: DWARF register number
        name: Canonical display name (e.g. "rsp", "fs.base", "x1/ra")
    """

    symbol: str
    number: int
    name: str

    def __int__(self) -> int:
        return self.number

    def __index__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return self.name
