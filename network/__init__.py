"""
Network Module
==============

Provides the mock network generator and the derived network metrics.

Classes
-------
GeneratorConfig
    Sizes and value ranges of a generated network.
MockNetwork
    The Systems, Connectors and Interfaces of a generated network.
NetworkMetrics
    Summary figures of a network.
ConnectorStatus
    State of a Connector with respect to an isolated batch.

Functions
---------
generate_mock_network
    Generate a random three-tier network from three counts.
generate_network
    Generate a network from a GeneratorConfig.
compute_network_metrics
    Compute total connections, average connectivity and Interface spread.
system_summary_frame
    Tabulate the Systems of a network as a pandas DataFrame.
"""

from network.generator import (
    GeneratorConfig,
    MockNetwork,
    generate_mock_network,
    generate_network,
)
from network.metrics import (
    ConnectorStatus,
    NetworkMetrics,
    compute_network_metrics,
    system_summary_frame,
)

__all__ = [
    "GeneratorConfig",
    "MockNetwork",
    "generate_mock_network",
    "generate_network",
    "ConnectorStatus",
    "NetworkMetrics",
    "compute_network_metrics",
    "system_summary_frame",
]
