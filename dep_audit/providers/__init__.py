"""Production implementations of the scanner collaborators."""

from .composer import ComposerFileProvider, ComposerVersionOracle
from .inventory import InventoryClassInspector, InventoryComponentSource, load_inventory
from .platform import PhpVersionProvider

__all__ = [
    "ComposerFileProvider",
    "ComposerVersionOracle",
    "InventoryClassInspector",
    "InventoryComponentSource",
    "PhpVersionProvider",
    "load_inventory",
]
