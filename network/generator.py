#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Mock Network Generator
======================

Builds a random three-tier network of Systems, Connectors and Interfaces.

Network topology
----------------
*  n Systems, each with a uniform random load in [0, 100) and priority in 1..5
*  m Connectors, spread evenly over the Systems in creation order
*  k Interfaces, each Connector attached to 1-2 of them

Interface attachment is greedy: every Connector picks, among the Interfaces
it is not yet attached to, the one with the fewest connections so far.  The
spread of connection counts over the Interfaces therefore stays small.

Degenerate sizes are valid input.  Zero Systems leaves the Connectors
unbound; zero Interfaces leaves every Connector without links.

Public API
----------
``generate_mock_network(n_systems, n_connectors, n_interfaces, seed)``
    -> ``MockNetwork``

``generate_network(config, random_source)``
    -> ``MockNetwork``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from core.entities import Connector, Interface, System, SystemAttributes
from core.network_index import NetworkIndex
from core.random_source import RandomSource


# ═══════════════════════════════════════════════════════════════════════════════
#  CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class GeneratorConfig:
    """
    Size and value ranges of a generated network.

    Attributes
    ----------
    n_systems : int
        Number of Systems to create.
    n_connectors : int
        Number of Connectors to create.
    n_interfaces : int
        Number of Interfaces to create.
    seed : int or None
        Seed for the random source. ``None`` gives a fresh network each call.
    max_interfaces_per_connector : int
        Upper bound of the random attachment count of a Connector.
    load_max : float
        Upper bound of the uniform System load.
    priority_levels : int
        Number of priority levels; priorities are drawn from 1..priority_levels.
    """
    n_systems: int
    n_connectors: int
    n_interfaces: int
    seed: Optional[int] = None
    max_interfaces_per_connector: int = 2
    load_max: float = 100.0
    priority_levels: int = 5

    def __post_init__(self) -> None:
        """Validate parameters after initialisation."""
        for name in ("n_systems", "n_connectors", "n_interfaces"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.max_interfaces_per_connector < 1:
            raise ValueError(
                f"max_interfaces_per_connector must be at least 1, "
                f"got {self.max_interfaces_per_connector}"
            )
        if self.load_max < 0:
            raise ValueError(f"load_max must be non-negative, got {self.load_max}")
        if self.priority_levels < 1:
            raise ValueError(
                f"priority_levels must be at least 1, got {self.priority_levels}"
            )


# ═══════════════════════════════════════════════════════════════════════════════
#  GENERATED NETWORK
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass
class MockNetwork:
    """
    The three entity collections produced by the generator.

    Iterating a MockNetwork yields ``(systems, connectors, interfaces)`` so it
    can be unpacked like a tuple.

    Attributes
    ----------
    systems : list[System]
        Systems in creation order.
    connectors : list[Connector]
        Connectors in creation order.
    interfaces : list[Interface]
        Interfaces in creation order.
    """
    systems: List[System] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)
    interfaces: List[Interface] = field(default_factory=list)

    def __iter__(self) -> Iterator[list]:
        return iter((self.systems, self.connectors, self.interfaces))

    def index(self) -> NetworkIndex:
        """Build an id-keyed index over this network."""
        return NetworkIndex(self.systems, self.connectors, self.interfaces)

    @property
    def n_systems(self) -> int:
        """Return the number of Systems."""
        return len(self.systems)

    @property
    def n_connectors(self) -> int:
        """Return the number of Connectors."""
        return len(self.connectors)

    @property
    def n_interfaces(self) -> int:
        """Return the number of Interfaces."""
        return len(self.interfaces)


# ═══════════════════════════════════════════════════════════════════════════════
#  BUILD STEPS
# ═══════════════════════════════════════════════════════════════════════════════

def _create_systems(config: GeneratorConfig, rs: RandomSource) -> List[System]:
    return [
        System(
            id=f"s{i}",
            name=f"System {i}",
            attributes=SystemAttributes(
                load=rs.load(config.load_max),
                priority=rs.priority(config.priority_levels),
            ),
        )
        for i in range(config.n_systems)
    ]


def _even_system_index(i: int, n_connectors: int, n_systems: int) -> int:
    """
    System index of the i-th Connector under even distribution.

    Equals ``floor(i / (n_connectors / n_systems))`` computed in integers,
    clamped to the last System.
    """
    return min((i * n_systems) // n_connectors, n_systems - 1)


def _create_connectors(
    config: GeneratorConfig,
    systems: List[System],
    rs: RandomSource,
) -> List[Connector]:
    connectors = []
    for i in range(config.n_connectors):
        connector = Connector(id=f"c{i}", name=f"Connector {i}")
        if systems:
            # Random owner first, then overridden by the even spread below.
            connector.system_id = systems[rs.system_index(len(systems))].id
        connectors.append(connector)

    if not systems:
        return connectors

    for i, connector in enumerate(connectors):
        owner = systems[_even_system_index(i, len(connectors), len(systems))]
        connector.system_id = owner.id
        owner.connectors.append(connector.id)
    return connectors


def _create_interfaces(config: GeneratorConfig) -> List[Interface]:
    return [
        Interface(id=f"i{i}", name=f"Interface {i}")
        for i in range(config.n_interfaces)
    ]


def _attach_interfaces(
    connectors: List[Connector],
    interfaces: List[Interface],
    rs: RandomSource,
    max_per_connector: int,
) -> None:
    """
    Attach every Connector to its least-connected Interfaces.

    For each Connector, in creation order, a fresh candidate pool holding all
    Interfaces is sorted by connection count (stable, so ties keep the pool
    order) and the head is attached and removed.  This repeats for the drawn
    attachment count or until the pool is empty.
    """
    for connector in connectors:
        n_attach = rs.attachment_count(max_per_connector)
        pool = list(interfaces)
        for _ in range(n_attach):
            if not pool:
                break
            pool.sort(key=lambda iface: len(iface.connector_ids))
            selected = pool.pop(0)
            connector.interface_ids.append(selected.id)
            selected.connector_ids.append(connector.id)


# ═══════════════════════════════════════════════════════════════════════════════
#  PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════════

def generate_network(
    config: GeneratorConfig,
    random_source: Optional[RandomSource] = None,
) -> MockNetwork:
    """
    Generate a network according to *config*.

    Parameters
    ----------
    config : GeneratorConfig
        Sizes and value ranges.
    random_source : RandomSource, optional
        Source of all random draws.  Defaults to ``RandomSource(config.seed)``.

    Returns
    -------
    MockNetwork
        Freshly created Systems, Connectors and Interfaces, fully wired.
    """
    rs = random_source if random_source is not None else RandomSource(config.seed)

    systems = _create_systems(config, rs)
    connectors = _create_connectors(config, systems, rs)
    interfaces = _create_interfaces(config)
    _attach_interfaces(connectors, interfaces, rs, config.max_interfaces_per_connector)

    return MockNetwork(systems=systems, connectors=connectors, interfaces=interfaces)


def generate_mock_network(
    n_systems: int,
    n_connectors: int,
    n_interfaces: int,
    seed: Optional[int] = None,
) -> MockNetwork:
    """
    Generate a random three-tier network.

    Parameters
    ----------
    n_systems : int
        Number of Systems (>= 0).
    n_connectors : int
        Number of Connectors (>= 0).
    n_interfaces : int
        Number of Interfaces (>= 0).
    seed : int, optional
        Seed for reproducible generation.

    Returns
    -------
    MockNetwork
        The generated network; unpacks to ``(systems, connectors, interfaces)``.

    Raises
    ------
    ValueError
        If any count is negative.
    """
    config = GeneratorConfig(
        n_systems=n_systems,
        n_connectors=n_connectors,
        n_interfaces=n_interfaces,
        seed=seed,
    )
    return generate_network(config)

