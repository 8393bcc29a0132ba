"""Pre-computed component and class inventory.

Component discovery and class reflection happen upstream; their results are
handed over as a JSON document of this shape::

    {
      "modules": {
        "Vendor_Module": {
          "components": [
            {"component": "Magento\\\\Framework", "package": "magento/framework",
             "version": "103.0.6", "soft": false}
          ],
          "classes": ["Vendor\\\\Module\\\\Model\\\\Foo"]
        }
      },
      "classes": {
        "Vendor\\\\Module\\\\Model\\\\Foo": {"deprecated": true},
        "Vendor\\\\Module\\\\Model\\\\FooFactory": {"inspectable": false}
      }
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from ..core.component import ClassLoadResult, ClassMetadata, Component
from ..exceptions import InventoryError


class InventoryComponentSource:
    """Serves components and class names per module from an inventory."""

    def __init__(self, modules: Dict[str, Dict[str, Any]]) -> None:
        self._components: Dict[str, List[Component]] = {}
        self._class_names: Dict[str, List[str]] = {}

        for module_name, entry in modules.items():
            try:
                self._components[module_name] = [
                    Component.from_dict(item) for item in entry.get("components", [])
                ]
                self._class_names[module_name] = [str(name) for name in entry.get("classes", [])]
            except (AttributeError, TypeError, ValueError) as e:
                raise InventoryError(f"Invalid inventory entry for module {module_name}: {e}") from e

    def get_module_names(self) -> List[str]:
        return list(self._components)

    def get_components_for_module(self, module_name: str) -> List[Component]:
        return list(self._components.get(module_name, []))

    def get_class_names_for_module(self, module_name: str) -> List[str]:
        return list(self._class_names.get(module_name, []))


class InventoryClassInspector:
    """Resolves class metadata recorded in an inventory."""

    def __init__(self, classes: Dict[str, Dict[str, Any]]) -> None:
        self._classes = classes

    def load_class(self, class_name: str) -> ClassLoadResult:
        """Load metadata for a class.

        Generated, virtual and abstract names are not inspectable and come
        back as a skip result.
        """
        entry = self._classes.get(class_name)
        if entry is None:
            return ClassLoadResult.skip(class_name, "class not found in inventory")

        if not entry.get("inspectable", True):
            return ClassLoadResult.skip(class_name, "class is not inspectable")

        return ClassLoadResult.loaded(
            ClassMetadata(name=class_name, deprecated=bool(entry.get("deprecated", False)))
        )


def load_inventory(inventory_file: Path) -> Dict[str, Any]:
    """Load and validate an inventory document.

    Raises:
        InventoryError: If the file is missing, unreadable or malformed
    """
    try:
        with open(inventory_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InventoryError(f"Failed to load inventory {inventory_file}: {e}") from e

    if not isinstance(data, dict):
        raise InventoryError(f"Inventory {inventory_file} must be a JSON object")

    for key in ("modules", "classes"):
        if not isinstance(data.setdefault(key, {}), dict):
            raise InventoryError(f'Inventory key "{key}" must be a JSON object')
    return data
