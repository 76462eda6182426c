"""
Register catalogs.

A RegisterCatalog answers two questions for one architecture: which name
belongs to a DWARF register number, and which number belongs to a name.
Both return None when the table has no such entry.

One catalog per architecture is built at import time; they are never
modified afterwards, so they can be shared freely between threads.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Union

from .architectures import Architecture
from .errors import DuplicateRegisterError
from .registers import Register
from .tables import ARM_REGISTERS, RISCV64_REGISTERS, X86_64_REGISTERS, X86_REGISTERS


logger = logging.getLogger(__name__)


class RegisterCatalog:
    """
    Number/name lookup table for one architecture.

    Registers are also reachable by symbol, as attributes:

        >>> CATALOGS[Architecture.X86_64].RSP.number
        7
    """

    def __init__(self, architecture: Architecture, registers: Iterable[Register]):
        """
        Build the lookup maps.

        Args:
            architecture: Architecture the table belongs to
            registers: Table entries in declaration order

        Raises:
            DuplicateRegisterError: If a number, name or symbol appears twice
        """
        self.architecture = architecture
        self._registers: tuple[Register, ...] = tuple(registers)
        self._by_number: dict[int, Register] = {}
        self._by_name: dict[str, Register] = {}
        self._by_symbol: dict[str, Register] = {}

        for reg in self._registers:
            _insert_unique(self._by_number, reg.number, reg, architecture, "number")
            _insert_unique(self._by_name, reg.name, reg, architecture, "name")
            _insert_unique(self._by_symbol, reg.symbol, reg, architecture, "symbol")

        logger.debug("Built %s register catalog: %d entries", architecture, len(self._registers))

    def name_for(self, number: int) -> Optional[str]:
        """Return the name of register ``number``, or None if it is not in the table."""
        reg = self._by_number.get(_as_number(number))
        return reg.name if reg is not None else None

    def identifier_for(self, name: str) -> Optional[int]:
        """
        Return the register number for ``name``, or None if it is not in the table.

        The match is exact. RISC-V integer registers only match their full
        display string ("x1/ra"), not either half.
        """
        reg = self._by_name.get(name)
        return reg.number if reg is not None else None

    def register(self, symbol: str) -> Optional[Register]:
        """Return the entry with constant name ``symbol`` (e.g. "FS_BASE")."""
        return self._by_symbol.get(symbol)

    def __getattr__(self, symbol: str) -> Register:
        if symbol.startswith("_"):
            raise AttributeError(symbol)
        reg = self._by_symbol.get(symbol)
        if reg is None:
            raise AttributeError(f"{self.architecture} has no register {symbol!r}")
        return reg

    def __iter__(self) -> Iterator[Register]:
        return iter(self._registers)

    def __len__(self) -> int:
        return len(self._registers)

    def __contains__(self, number: object) -> bool:
        return _as_number(number) in self._by_number

    def __repr__(self) -> str:
        return f"RegisterCatalog({self.architecture}, {len(self._registers)} registers)"


def _as_number(number):
    """Lookup key for a register number or a Register constant."""
    return number.number if isinstance(number, Register) else number


def _insert_unique(table: dict, key, reg: Register, architecture: Architecture, field: str) -> None:
    """Add ``reg`` under ``key``, refusing to overwrite an earlier entry."""
    if key in table:
        raise DuplicateRegisterError(str(architecture), field, key)
    table[key] = reg


CATALOGS = MappingProxyType({
    Architecture.ARM: RegisterCatalog(Architecture.ARM, ARM_REGISTERS),
    Architecture.X86: RegisterCatalog(Architecture.X86, X86_REGISTERS),
    Architecture.X86_64: RegisterCatalog(Architecture.X86_64, X86_64_REGISTERS),
    Architecture.RISCV64: RegisterCatalog(Architecture.RISCV64, RISCV64_REGISTERS),
})


def get_catalog(architecture: Union[Architecture, str]) -> RegisterCatalog:
    """
    Get the catalog for an architecture.

    Args:
        architecture: Architecture member or a name Architecture.parse accepts

    Raises:
        UnknownArchitectureError: If a name does not match any architecture
    """
    return CATALOGS[Architecture.parse(architecture)]


def name_for(architecture: Union[Architecture, str], identifier: int) -> Optional[str]:
    """Name of DWARF register ``identifier`` on ``architecture``, or None."""
    return get_catalog(architecture).name_for(identifier)


def identifier_for(architecture: Union[Architecture, str], name: str) -> Optional[int]:
    """DWARF register number of ``name`` on ``architecture``, or None."""
    return get_catalog(architecture).identifier_for(name)
