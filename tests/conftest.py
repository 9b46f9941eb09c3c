"""
Shared fixtures for the network and isolation tests.

The hand-built "hub network" has four Systems with known impacts:

    System   load  priority  connectors             impact
    ------   ----  --------  ---------------------  ------
    s0 (A)   95    2         c0 -> i0, i1           2
    s1 (B)   80    5         c1 -> i0, i1; c2 -> i2 3
    s2 (C)   70    4         c3 -> i0               1
    s3 (D)   10    1         c4 -> i2               1

Weighted load scores: A 90.5, B 77.0, C 76.0, D 34.0.
"""

import pytest

from core.entities import Connector, Interface, System, SystemAttributes
from network.generator import MockNetwork


def make_hub_network() -> MockNetwork:
    """Build the hub network described in the module docstring."""
    systems = [
        System("s0", "System 0", SystemAttributes(load=95.0, priority=2), ["c0"]),
        System("s1", "System 1", SystemAttributes(load=80.0, priority=5), ["c1", "c2"]),
        System("s2", "System 2", SystemAttributes(load=70.0, priority=4), ["c3"]),
        System("s3", "System 3", SystemAttributes(load=10.0, priority=1), ["c4"]),
    ]
    connectors = [
        Connector("c0", "Connector 0", "s0", ["i0", "i1"]),
        Connector("c1", "Connector 1", "s1", ["i0", "i1"]),
        Connector("c2", "Connector 2", "s1", ["i2"]),
        Connector("c3", "Connector 3", "s2", ["i0"]),
        Connector("c4", "Connector 4", "s3", ["i2"]),
    ]
    interfaces = [
        Interface("i0", "Interface 0", ["c0", "c1", "c3"]),
        Interface("i1", "Interface 1", ["c0", "c1"]),
        Interface("i2", "Interface 2", ["c2", "c4"]),
    ]
    return MockNetwork(systems=systems, connectors=connectors, interfaces=interfaces)


@pytest.fixture
def hub_network() -> MockNetwork:
    """Fresh hub network for each test."""
    return make_hub_network()
