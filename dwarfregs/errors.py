"""
Custom exception types for the register catalog.

Lookups never raise: a missing register is reported as None. These
exceptions cover bad table data and unrecognised architecture names.
"""


class CatalogError(Exception):
    """Base exception for register catalog errors."""

    pass


class DuplicateRegisterError(CatalogError):
    """Exception raised when a register table repeats a number, name or symbol."""

    def __init__(self, architecture: str, field: str, value):
        self.architecture = architecture
        self.field = field
        self.value = value
        super().__init__(f"{architecture}: duplicate register {field} {value!r}")


class UnknownArchitectureError(CatalogError, ValueError):
    """Exception raised for an architecture name that is not supported."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown architecture: {name}")
