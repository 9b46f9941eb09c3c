"""
Network Index Module
====================

This module defines the NetworkIndex class, an id-keyed view over the three
entity collections of a network.

The entities reference each other by id. The index is built once from the
collections and answers the cross-entity questions asked by the isolator and
the metrics (which Connectors a System owns, which Interfaces a System
reaches) without walking the collections again for every System.

The index never mutates the entities it is built from.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from core.entities import Connector, Interface, System


class NetworkIndex:
    """
    Id-based lookups over Systems, Connectors and Interfaces.

    Ownership of a Connector is resolved through its ``system_id``, so the
    index stays correct even if a caller assembles collections whose
    ``System.connectors`` lists are incomplete.

    Attributes
    ----------
    systems : dict[str, System]
        Systems keyed by id.
    connectors : dict[str, Connector]
        Connectors keyed by id.
    interfaces : dict[str, Interface]
        Interfaces keyed by id.
    """

    def __init__(
        self,
        systems: Sequence[System],
        connectors: Sequence[Connector],
        interfaces: Sequence[Interface],
    ) -> None:
        """
        Build the index.

        Parameters
        ----------
        systems : sequence of System
            All Systems of the network.
        connectors : sequence of Connector
            All Connectors of the network.
        interfaces : sequence of Interface
            All Interfaces of the network.
        """
        self.systems: Dict[str, System] = {s.id: s for s in systems}
        self.connectors: Dict[str, Connector] = {c.id: c for c in connectors}
        self.interfaces: Dict[str, Interface] = {i.id: i for i in interfaces}

        self._connectors_by_system: Dict[str, List[Connector]] = {}
        for connector in connectors:
            if connector.system_id is None:
                continue
            self._connectors_by_system.setdefault(connector.system_id, []).append(connector)

        self._reach: Dict[str, FrozenSet[str]] = {}

    @classmethod
    def from_network(cls, network) -> "NetworkIndex":
        """Build the index from any object with systems, connectors and interfaces."""
        return cls(network.systems, network.connectors, network.interfaces)

    def system(self, system_id: str) -> Optional[System]:
        """Return the System with the given id, or None."""
        return self.systems.get(system_id)

    def connector(self, connector_id: str) -> Optional[Connector]:
        """Return the Connector with the given id, or None."""
        return self.connectors.get(connector_id)

    def interface(self, interface_id: str) -> Optional[Interface]:
        """Return the Interface with the given id, or None."""
        return self.interfaces.get(interface_id)

    def connectors_of(self, system_id: str) -> List[Connector]:
        """Return the Connectors whose ``system_id`` equals *system_id*."""
        return list(self._connectors_by_system.get(system_id, []))

    def owner_of(self, connector: Connector) -> Optional[System]:
        """Return the System owning *connector*, or None if unbound."""
        if connector.system_id is None:
            return None
        return self.systems.get(connector.system_id)

    def interfaces_of(self, connector: Connector) -> List[Interface]:
        """Return the existing Interfaces linked by *connector*, in link order."""
        return [
            self.interfaces[iid] for iid in connector.interface_ids if iid in self.interfaces
        ]

    def reachable_interface_ids(self, system_id: str) -> FrozenSet[str]:
        """
        Return the distinct Interface ids reachable through a System's Connectors.

        Parameters
        ----------
        system_id : str
            Id of the System.

        Returns
        -------
        frozenset[str]
            Union of ``interface_ids`` over every Connector owned by the System.
        """
        reach = self._reach.get(system_id)
        if reach is None:
            reach = frozenset(
                iid
                for connector in self._connectors_by_system.get(system_id, [])
                for iid in connector.interface_ids
            )
            self._reach[system_id] = reach
        return reach

    def systems_at(self, interface_id: str) -> List[System]:
        """Return the distinct Systems attached to an Interface, in attachment order."""
        interface = self.interfaces.get(interface_id)
        if interface is None:
            return []
        seen: Dict[str, System] = {}
        for cid in interface.connector_ids:
            connector = self.connectors.get(cid)
            if connector is None:
                continue
            owner = self.owner_of(connector)
            if owner is not None and owner.id not in seen:
                seen[owner.id] = owner
        return list(seen.values())

    def ids(self, systems: Iterable[System]) -> FrozenSet[str]:
        """Return the ids of *systems* as a frozenset."""
        return frozenset(s.id for s in systems)

    @property
    def n_systems(self) -> int:
        """Return the number of indexed Systems."""
        return len(self.systems)

    @property
    def n_connectors(self) -> int:
        """Return the number of indexed Connectors."""
        return len(self.connectors)

    @property
    def n_interfaces(self) -> int:
        """Return the number of indexed Interfaces."""
        return len(self.interfaces)
