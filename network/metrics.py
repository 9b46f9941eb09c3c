"""
Network Metrics Module
======================

Derived figures for displaying a network and an isolated batch:

    - total connections: number of Connector-Interface links
    - average connectivity: links per System
    - Interface connection counts and their spread
    - per-Connector status with respect to an isolated batch
    - a per-System summary table (pandas DataFrame)

All functions are read-only over the entity collections.  An empty network
yields zero counts; the average connectivity of a network without Systems is
NaN rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Iterable, Optional, Sequence

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from core.entities import Connector, Interface, System
from core.network_index import NetworkIndex


@dataclass(frozen=True)
class NetworkMetrics:
    """
    Summary figures of a network.

    Attributes
    ----------
    n_systems : int
        Number of Systems.
    n_connectors : int
        Number of Connectors.
    n_interfaces : int
        Number of Interfaces.
    total_connections : int
        Sum of ``len(interface_ids)`` over all Connectors.
    average_connectivity : float
        ``total_connections / n_systems``; NaN without Systems.
    connection_imbalance : int
        Spread (max - min) of the Interface connection counts.
    """
    n_systems: int
    n_connectors: int
    n_interfaces: int
    total_connections: int
    average_connectivity: float
    connection_imbalance: int


@dataclass(frozen=True)
class ConnectorStatus:
    """
    State of a Connector with respect to an isolated batch.

    Attributes
    ----------
    is_isolated : bool
        True if the owning System belongs to the isolated batch.
    connection_count : int
        Number of existing Interfaces the Connector links to.
    """
    is_isolated: bool
    connection_count: int


def total_connections(connectors: Iterable[Connector]) -> int:
    """Return the number of Connector-Interface links."""
    return sum(len(c.interface_ids) for c in connectors)


def average_connectivity(
    systems: Sequence[System],
    connectors: Iterable[Connector],
) -> float:
    """Return the number of links per System, or NaN if there are no Systems."""
    if len(systems) == 0:
        return float("nan")
    return total_connections(connectors) / len(systems)


def interface_connection_counts(interfaces: Sequence[Interface]) -> NDArray[np.int64]:
    """Return the number of attached Connectors of each Interface."""
    return np.array([len(i.connector_ids) for i in interfaces], dtype=np.int64)


def connection_imbalance(interfaces: Sequence[Interface]) -> int:
    """Return max - min of the Interface connection counts (0 if none)."""
    counts = interface_connection_counts(interfaces)
    if counts.size == 0:
        return 0
    return int(counts.max() - counts.min())


def connector_status(
    connector: Connector,
    index: NetworkIndex,
    isolated_ids: Collection[str],
) -> ConnectorStatus:
    """
    Classify a Connector against an isolated batch.

    Parameters
    ----------
    connector : Connector
        Connector to classify.
    index : NetworkIndex
        Index over the network.
    isolated_ids : collection of str
        Ids of the isolated Systems.

    Returns
    -------
    ConnectorStatus
    """
    owner = index.owner_of(connector)
    return ConnectorStatus(
        is_isolated=owner is not None and owner.id in isolated_ids,
        connection_count=len(index.interfaces_of(connector)),
    )


def compute_network_metrics(network) -> NetworkMetrics:
    """
    Compute the summary figures of a network.

    Parameters
    ----------
    network : MockNetwork
        Any object exposing ``systems``, ``connectors`` and ``interfaces``.

    Returns
    -------
    NetworkMetrics
    """
    return NetworkMetrics(
        n_systems=len(network.systems),
        n_connectors=len(network.connectors),
        n_interfaces=len(network.interfaces),
        total_connections=total_connections(network.connectors),
        average_connectivity=average_connectivity(network.systems, network.connectors),
        connection_imbalance=connection_imbalance(network.interfaces),
    )


def system_summary_frame(
    network,
    isolated: Optional[Iterable[System]] = None,
) -> pd.DataFrame:
    """
    Tabulate the Systems of a network.

    Parameters
    ----------
    network : MockNetwork
        Any object exposing ``systems``, ``connectors`` and ``interfaces``.
    isolated : iterable of System, optional
        Isolated batch; marks the ``isolated`` column.

    Returns
    -------
    pd.DataFrame
        One row per System, indexed by System id, with columns ``name``,
        ``load``, ``priority``, ``n_connectors``, ``impact`` and ``isolated``.
    """
    index = NetworkIndex.from_network(network)
    isolated_ids = index.ids(isolated or [])
    columns = ["name", "load", "priority", "n_connectors", "impact", "isolated"]

    rows = [
        {
            "id": s.id,
            "name": s.name,
            "load": float(s.attributes.load),
            "priority": int(s.attributes.priority),
            "n_connectors": len(index.connectors_of(s.id)),
            "impact": len(index.reachable_interface_ids(s.id)),
            "isolated": s.id in isolated_ids,
        }
        for s in network.systems
    ]
    if not rows:
        return pd.DataFrame(columns=columns, index=pd.Index([], name="id"))
    return pd.DataFrame(rows).set_index("id")[columns]
