"""
containers/hazards.py - Hazard notification

Liquid and gas containers can raise a hazard notice identified by their id.
The notice is a side effect only; no container state changes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Protocol, runtime_checkable
import logging

from .enums import ContainerKind

logger = logging.getLogger("cargoship.hazards")


@runtime_checkable
class HazardNotifier(Protocol):
    """Receives hazard notices from containers."""

    def notify_hazard(self, container_id: str, kind: ContainerKind) -> None:
        ...


class LoggingHazardNotifier:
    """Emits each hazard notice as a WARNING log record."""

    def notify_hazard(self, container_id: str, kind: ContainerKind) -> None:
        logger.warning(f"Hazard warning: {kind.label} container {container_id}")


@dataclass
class HazardNotice:
    """A single recorded hazard notice."""
    container_id: str
    kind: ContainerKind
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "container_id": self.container_id,
            "kind": self.kind.value,
            "issued_at": self.issued_at.isoformat(),
        }


class RecordingHazardNotifier:
    """Keeps hazard notices in memory, e.g. for a console summary or tests."""

    def __init__(self):
        self.notices: List[HazardNotice] = []

    def notify_hazard(self, container_id: str, kind: ContainerKind) -> None:
        self.notices.append(HazardNotice(container_id=container_id, kind=kind))

    @property
    def container_ids(self) -> List[str]:
        return [n.container_id for n in self.notices]

    def clear(self) -> None:
        self.notices.clear()
