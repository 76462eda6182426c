"""
Supported architectures.

The set is closed: every architecture has exactly one register table in
``dwarfregs.tables``.
"""

from enum import Enum

from .errors import UnknownArchitectureError


class Architecture(Enum):
    """Architectures with a DWARF register catalog."""

    ARM = "arm"
    X86 = "x86"  # 32-bit
    X86_64 = "x86_64"
    RISCV64 = "riscv64"

    def __str__(self) -> str:
        return self.value

    @property
    def reference(self) -> str:
        """Document the register numbering is taken from."""
        return ABI_REFERENCES[self]

    @classmethod
    def parse(cls, text: str) -> "Architecture":
        """
        Parse an architecture name.

        Args:
            text: Name as written by toolchains (e.g. "amd64", "i686", "rv64")

        Returns:
            The matching Architecture

        Raises:
            UnknownArchitectureError: If the name is not recognised
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise UnknownArchitectureError(repr(text))

        match text.strip().lower():
            case "arm" | "arm32" | "armv7":
                return cls.ARM
            case "x86" | "i386" | "i686" | "ia32":
                return cls.X86
            case "x86_64" | "x86-64" | "amd64" | "x64":
                return cls.X86_64
            case "riscv64" | "rv64":
                return cls.RISCV64
            case _:
                raise UnknownArchitectureError(text)


ABI_REFERENCES = {
    Architecture.ARM: (
        "DWARF for the ARM Architecture (IHI 0040B), "
        "http://infocenter.arm.com/help/topic/com.arm.doc.ihi0040b/IHI0040B_aadwarf.pdf"
    ),
    Architecture.X86: (
        "Intel386 psABI version 1.1, "
        "https://github.com/hjl-tools/x86-psABI/wiki/X86-psABI"
    ),
    Architecture.X86_64: (
        "x86-64 psABI version 1.0, "
        "https://github.com/hjl-tools/x86-psABI/wiki/X86-psABI"
    ),
    Architecture.RISCV64: (
        "RISC-V ELF psABI specification, "
        "https://github.com/riscv/riscv-elf-psabi-doc/blob/master/riscv-elf.md#dwarf-register-numbers"
    ),
}
