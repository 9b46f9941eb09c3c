"""
Core Module
============

This module provides the core data structures of the component network.

Classes
-------
System
    A component carrying a load and a priority, owning Connectors.
SystemAttributes
    Load and priority of a System.
Connector
    An edge owned by one System, linking up to two Interfaces.
Interface
    A shared endpoint collecting attached Connectors.
NetworkIndex
    Id-keyed lookups over the three entity collections.
RandomSource
    Seedable source of all random draws used during generation.
"""

from core.entities import System, SystemAttributes, Connector, Interface
from core.network_index import NetworkIndex
from core.random_source import RandomSource

__all__ = [
    "System",
    "SystemAttributes",
    "Connector",
    "Interface",
    "NetworkIndex",
    "RandomSource",
]
