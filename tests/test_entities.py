"""
Tests for the entity classes.
"""

import pytest

from core.entities import Connector, Interface, System, SystemAttributes
from core.random_source import RandomSource


class TestSystem:
    """Test cases for System class."""

    def test_create_system(self):
        system = System(
            id="s0",
            name="System 0",
            attributes=SystemAttributes(load=42.5, priority=3),
        )
        assert system.connectors == []
        assert system.load == 42.5
        assert system.priority == 3
        assert system.n_connectors == 0

    def test_connector_lists_not_shared(self):
        a = System("s0", "System 0", SystemAttributes(1.0, 1))
        b = System("s1", "System 1", SystemAttributes(1.0, 1))
        a.connectors.append("c0")
        assert b.connectors == []

    def test_identity_comparison(self):
        a = System("s0", "System 0", SystemAttributes(1.0, 1))
        b = System("s0", "System 0", SystemAttributes(1.0, 1))
        assert a != b
        assert a == a

    def test_repr(self):
        system = System("s3", "System 3", SystemAttributes(12.345, 4))
        assert repr(system) == "System(id='s3', load=12.3, priority=4)"


class TestConnectorAndInterface:
    """Test cases for Connector and Interface classes."""

    def test_connector_defaults(self):
        connector = Connector(id="c0", name="Connector 0")
        assert connector.system_id is None
        assert not connector.is_bound
        assert connector.n_interfaces == 0

    def test_bound_connector(self):
        connector = Connector("c1", "Connector 1", "s0", ["i0", "i1"])
        assert connector.is_bound
        assert connector.n_interfaces == 2

    def test_interface_connections(self):
        interface = Interface("i0", "Interface 0", ["c0", "c1", "c2"])
        assert interface.n_connections == 3


class TestRandomSource:
    """Test cases for RandomSource class."""

    def test_draw_bounds(self):
        rs = RandomSource(seed=0)
        for _ in range(500):
            assert 0.0 <= rs.load() < 100.0
            assert 1 <= rs.priority() <= 5
            assert 0 <= rs.system_index(7) < 7
            assert rs.attachment_count() in (1, 2)

    def test_all_values_reachable(self):
        rs = RandomSource(seed=1)
        assert {rs.priority() for _ in range(500)} == {1, 2, 3, 4, 5}
        assert {rs.attachment_count() for _ in range(200)} == {1, 2}

    def test_seeded_sequences_repeat(self):
        a, b = RandomSource(seed=99), RandomSource(seed=99)
        assert [a.load() for _ in range(10)] == [b.load() for _ in range(10)]
        assert a.seed == 99

    def test_draw_types(self):
        rs = RandomSource(seed=2)
        assert isinstance(rs.load(), float)
        assert isinstance(rs.priority(), int)
        assert isinstance(rs.attachment_count(3), int)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
