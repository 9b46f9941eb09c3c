"""
Entities Module
===============

This module defines the three entity kinds of the tiered component network:

    - System: a component carrying a load and a priority, owning Connectors
    - Connector: an edge owned by exactly one System, linking 1-2 Interfaces
    - Interface: a shared endpoint collecting the Connectors attached to it

Entities reference each other by id only. Each entity owns its scalar fields
and its id lists; cross-entity traversal goes through a NetworkIndex.

The id lists are filled by the generator and are treated as immutable once
the network has been returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SystemAttributes:
    """
    Operating attributes of a System.

    Attributes
    ----------
    load : float
        Current load in percent, within [0, 100].
    priority : int
        Priority level, within {1, 2, 3, 4, 5}. Higher means more urgent.
    """
    load: float
    priority: int


@dataclass(eq=False)
class System:
    """
    A component of the network.

    Systems are compared by identity: an isolation result holds references
    to the very System objects produced by the generator.

    Attributes
    ----------
    id : str
        Unique id token (e.g. ``"s3"``).
    name : str
        Display name (e.g. ``"System 3"``).
    connectors : list[str]
        Ids of the Connectors owned by this System, in attachment order.
    attributes : SystemAttributes
        Load and priority of the System.
    """
    id: str
    name: str
    attributes: SystemAttributes
    connectors: List[str] = field(default_factory=list)

    @property
    def load(self) -> float:
        """Return the System load."""
        return self.attributes.load

    @property
    def priority(self) -> int:
        """Return the System priority."""
        return self.attributes.priority

    @property
    def n_connectors(self) -> int:
        """Return the number of Connectors owned by this System."""
        return len(self.connectors)

    def __repr__(self) -> str:
        return (
            f"System(id={self.id!r}, load={self.attributes.load:.1f}, "
            f"priority={self.attributes.priority})"
        )


@dataclass(eq=False)
class Connector:
    """
    An edge between one owning System and up to two Interfaces.

    Attributes
    ----------
    id : str
        Unique id token (e.g. ``"c7"``).
    name : str
        Display name.
    system_id : str or None
        Id of the owning System. ``None`` only when the network has no
        Systems to bind to.
    interface_ids : list[str]
        Ids of the Interfaces this Connector links to, in attachment order.
    """
    id: str
    name: str
    system_id: Optional[str] = None
    interface_ids: List[str] = field(default_factory=list)

    @property
    def n_interfaces(self) -> int:
        """Return the number of Interfaces this Connector links to."""
        return len(self.interface_ids)

    @property
    def is_bound(self) -> bool:
        """Check if the Connector has an owning System."""
        return self.system_id is not None


@dataclass(eq=False)
class Interface:
    """
    A shared endpoint of the network.

    Attributes
    ----------
    id : str
        Unique id token (e.g. ``"i2"``).
    name : str
        Display name.
    connector_ids : list[str]
        Ids of the Connectors attached to this Interface, in attachment order.
    """
    id: str
    name: str
    connector_ids: List[str] = field(default_factory=list)

    @property
    def n_connections(self) -> int:
        """Return the number of Connectors attached to this Interface."""
        return len(self.connector_ids)
