"""
ship/ - Container ship roster and reporting
"""

from .models import ContainerShip

from .report import (
    ContainerSnapshot,
    ShipReport,
    format_ship_report,
)

__all__ = [
    "ContainerShip",
    "ContainerSnapshot",
    "ShipReport",
    "format_ship_report",
]
