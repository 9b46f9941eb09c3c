"""
Tests for the batch isolation runner script.
"""

import pytest

from run_isolation import print_summary, run_isolation


class TestRunIsolation:
    """Test cases for run_isolation and print_summary."""

    def test_one_record_per_request(self):
        log = run_isolation(
            n_systems=6, n_connectors=9, n_interfaces=4,
            batch_sizes=(1, 2), criteria=("load", "priority"),
            seed=0, verbose=False,
        )
        assert len(log.records) == 4
        assert [(r.criterion, r.batch_size) for r in log.records] == [
            ("load", 1), ("load", 2), ("priority", 1), ("priority", 2),
        ]
        for rec in log.records:
            assert rec.result.n_selected == rec.batch_size
            assert rec.n_isolated_connectors >= rec.batch_size

    def test_metrics_match_network(self):
        log = run_isolation(n_systems=4, n_connectors=4, n_interfaces=2, seed=3, verbose=False)
        assert log.metrics.n_systems == 4
        assert log.metrics.total_connections == sum(
            len(c.interface_ids) for c in log.network.connectors
        )

    def test_verbose_output(self, capsys):
        log = run_isolation(n_systems=5, n_connectors=8, n_interfaces=4, seed=1, verbose=True)
        print_summary(log)
        out = capsys.readouterr().out
        assert "BATCH ISOLATION" in out
        assert "SCENARIO SUMMARY" in out
        assert "Currently isolated systems: 3" in out

    def test_empty_network_summary(self, capsys):
        log = run_isolation(n_systems=0, n_connectors=0, n_interfaces=0, verbose=False)
        print_summary(log)
        out = capsys.readouterr().out
        assert "n/a (no systems)" in out
        assert all(r.result.n_selected == 0 for r in log.records)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
