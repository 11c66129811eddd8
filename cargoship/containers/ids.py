"""
containers/ids.py - Container id sequence

Sequential ids of the form ``<prefix>-<type code>-<n>``, counted separately
for each type code and starting at 1.
"""

from __future__ import annotations
from typing import Dict, Optional
import logging

from .enums import ContainerKind
from .policy import DEFAULT_ID_PREFIX

logger = logging.getLogger(__name__)


class ContainerIdSequence:
    """Per-type-code counters for container ids."""

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX):
        self.prefix = prefix
        self._counters: Dict[str, int] = {}

    def next_id(self, kind: ContainerKind) -> str:
        """Issue the next id for a container kind."""
        code = kind.type_code
        sequence = self._counters.get(code, 0) + 1
        self._counters[code] = sequence
        return f"{self.prefix}-{code}-{sequence}"

    def peek(self, kind: ContainerKind) -> int:
        """Sequence number the next id for this kind will carry."""
        return self._counters.get(kind.type_code, 0) + 1

    def issued(self, kind: ContainerKind) -> int:
        """Number of ids issued so far for this kind."""
        return self._counters.get(kind.type_code, 0)

    def reset(self, kind: Optional[ContainerKind] = None) -> None:
        """Restart numbering for one kind, or for all kinds."""
        if kind is None:
            self._counters.clear()
        else:
            self._counters.pop(kind.type_code, None)
        logger.debug(f"Id sequence reset ({kind.value if kind else 'all kinds'})")
