"""
Scoring Module
==============

This module provides the pure scoring functions used by the batch isolator:

    - system impact: how many distinct Interfaces a System reaches
    - weighted score: the selection criterion blended with the impact
    - network stability: average impact of the Systems left after isolation

The weighted score is

    score = w_c · criterion + w_i · (baseline - scale · impact)

with w_c = 0.7, w_i = 0.3, baseline = 100 and scale = 10 by default.  The
impact term favours Systems at the edge of the network over hubs.  It may go
negative for Systems with high impact; this is not clamped.
"""

from __future__ import annotations

from typing import Collection, Sequence

import numpy as np
from numpy.typing import NDArray

from core.entities import System
from core.network_index import NetworkIndex

CRITERIA = ("load", "priority")

CRITERION_WEIGHT = 0.7
IMPACT_WEIGHT = 0.3
IMPACT_BASELINE = 100.0
IMPACT_SCALE = 10.0


def system_impact(system: System, index: NetworkIndex) -> int:
    """
    Number of distinct Interfaces reachable through a System's Connectors.

    Parameters
    ----------
    system : System
        System to evaluate.
    index : NetworkIndex
        Index over the network the System belongs to.

    Returns
    -------
    int
        Size of the union of ``interface_ids`` over the Connectors whose
        ``system_id`` equals the System's id.
    """
    return len(index.reachable_interface_ids(system.id))


def criterion_value(system: System, criterion: str) -> float:
    """Return the System attribute selected by *criterion*."""
    if criterion == "load":
        return float(system.attributes.load)
    if criterion == "priority":
        return float(system.attributes.priority)
    raise ValueError(f"criterion must be one of {CRITERIA}, got {criterion!r}")


def weighted_score(
    criterion_val: float,
    impact: int,
    criterion_weight: float = CRITERION_WEIGHT,
    impact_weight: float = IMPACT_WEIGHT,
    impact_baseline: float = IMPACT_BASELINE,
    impact_scale: float = IMPACT_SCALE,
) -> float:
    """Blend a criterion value with a network impact into a single score."""
    return (
        criterion_val * criterion_weight
        + (impact_baseline - impact * impact_scale) * impact_weight
    )


def weighted_scores(
    systems: Sequence[System],
    index: NetworkIndex,
    criterion: str,
    criterion_weight: float = CRITERION_WEIGHT,
    impact_weight: float = IMPACT_WEIGHT,
    impact_baseline: float = IMPACT_BASELINE,
    impact_scale: float = IMPACT_SCALE,
) -> NDArray[np.float64]:
    """
    Compute the weighted score of every System.

    Parameters
    ----------
    systems : sequence of System
        Systems to score.
    index : NetworkIndex
        Index over the network.
    criterion : str
        ``"load"`` or ``"priority"``.

    Returns
    -------
    NDArray[np.float64]
        One score per System, in the order of *systems*.
    """
    scores = np.zeros(len(systems), dtype=np.float64)
    for k, system in enumerate(systems):
        scores[k] = weighted_score(
            criterion_value(system, criterion),
            system_impact(system, index),
            criterion_weight=criterion_weight,
            impact_weight=impact_weight,
            impact_baseline=impact_baseline,
            impact_scale=impact_scale,
        )
    return scores


def network_stability(
    selected_ids: Collection[str],
    systems: Sequence[System],
    index: NetworkIndex,
) -> float:
    """
    Average impact of the Systems that are not in the selected batch.

    Parameters
    ----------
    selected_ids : collection of str
        Ids of the Systems in the candidate batch.
    systems : sequence of System
        All Systems of the network.
    index : NetworkIndex
        Index over the network.

    Returns
    -------
    float
        Mean impact of the remaining Systems; higher means the remaining
        network stays better connected.  NaN when no System remains.
    """
    remaining = [s for s in systems if s.id not in selected_ids]
    if not remaining:
        return float("nan")
    total = sum(system_impact(s, index) for s in remaining)
    return total / len(remaining)
