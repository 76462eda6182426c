"""
dwarfregs - DWARF register number and name catalogs.

Maps DWARF register numbers to the names tooling displays for them, and back,
for ARM, x86, x86-64 and RV64.
"""

from .architectures import Architecture
from .catalog import CATALOGS, RegisterCatalog, get_catalog, identifier_for, name_for
from .errors import CatalogError, DuplicateRegisterError, UnknownArchitectureError
from .registers import Register

__version__ = "1.0.0"
__all__ = [
    "Architecture",
    "CATALOGS",
    "CatalogError",
    "DuplicateRegisterError",
    "Register",
    "RegisterCatalog",
    "UnknownArchitectureError",
    "get_catalog",
    "identifier_for",
    "name_for",
]
