"""
Tests for the network metrics.
"""

import math

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_array_equal

from network.generator import MockNetwork, generate_mock_network
from network.metrics import (
    NetworkMetrics,
    average_connectivity,
    compute_network_metrics,
    connection_imbalance,
    connector_status,
    interface_connection_counts,
    system_summary_frame,
    total_connections,
)


class TestConnectionCounts:
    """Test cases for the connection counting functions."""

    def test_total_connections(self, hub_network):
        assert total_connections(hub_network.connectors) == 7

    def test_average_connectivity(self, hub_network):
        value = average_connectivity(hub_network.systems, hub_network.connectors)
        assert value == pytest.approx(7 / 4)

    def test_average_connectivity_without_systems(self):
        network = generate_mock_network(0, 3, 2, seed=0)
        assert math.isnan(average_connectivity(network.systems, network.connectors))

    def test_interface_connection_counts(self, hub_network):
        counts = interface_connection_counts(hub_network.interfaces)
        assert counts.dtype == np.int64
        assert_array_equal(counts, [3, 2, 2])

    def test_connection_imbalance(self, hub_network):
        assert connection_imbalance(hub_network.interfaces) == 1
        assert connection_imbalance([]) == 0


class TestConnectorStatus:
    """Test cases for connector_status."""

    def test_isolated_owner(self, hub_network):
        index = hub_network.index()
        status = connector_status(hub_network.connectors[1], index, {"s1"})
        assert status.is_isolated
        assert status.connection_count == 2

    def test_active_owner(self, hub_network):
        index = hub_network.index()
        status = connector_status(hub_network.connectors[4], index, {"s1"})
        assert not status.is_isolated
        assert status.connection_count == 1

    def test_unbound_connector(self):
        network = generate_mock_network(0, 1, 1, seed=0)
        status = connector_status(network.connectors[0], network.index(), set())
        assert not status.is_isolated
        assert status.connection_count == 1


class TestNetworkMetrics:
    """Test cases for compute_network_metrics."""

    def test_hub_network(self, hub_network):
        metrics = compute_network_metrics(hub_network)
        assert isinstance(metrics, NetworkMetrics)
        assert metrics.n_systems == 4
        assert metrics.n_connectors == 5
        assert metrics.n_interfaces == 3
        assert metrics.total_connections == 7
        assert metrics.average_connectivity == pytest.approx(1.75)
        assert metrics.connection_imbalance == 1

    def test_empty_network(self):
        metrics = compute_network_metrics(MockNetwork())
        assert metrics.total_connections == 0
        assert math.isnan(metrics.average_connectivity)
        assert metrics.connection_imbalance == 0

    def test_metrics_are_frozen(self, hub_network):
        metrics = compute_network_metrics(hub_network)
        with pytest.raises(AttributeError):
            metrics.total_connections = 0


class TestSystemSummaryFrame:
    """Test cases for system_summary_frame."""

    def test_columns_and_index(self, hub_network):
        frame = system_summary_frame(hub_network)
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == [
            "name", "load", "priority", "n_connectors", "impact", "isolated",
        ]
        assert list(frame.index) == ["s0", "s1", "s2", "s3"]

    def test_values(self, hub_network):
        frame = system_summary_frame(hub_network, isolated=[hub_network.systems[2]])
        assert frame.loc["s1", "impact"] == 3
        assert frame.loc["s1", "n_connectors"] == 2
        assert frame.loc["s0", "load"] == 95.0
        assert list(frame["isolated"]) == [False, False, True, False]

    def test_empty_network(self):
        frame = system_summary_frame(MockNetwork())
        assert frame.empty
        assert "impact" in frame.columns


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
