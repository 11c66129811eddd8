"""
containers/enums.py - Container enumerations
"""

from enum import Enum


class ContainerKind(Enum):
    """Closed set of container variants."""
    LIQUID = "liquid"
    GAS = "gas"
    COOLED = "cooled"

    @property
    def type_code(self) -> str:
        """Single-letter code used in container ids."""
        return CONTAINER_TYPE_CODES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


CONTAINER_TYPE_CODES = {
    ContainerKind.LIQUID: "L",
    ContainerKind.GAS: "G",
    ContainerKind.COOLED: "C",
}
