"""
Batch Isolator Module
=====================

This module selects a batch of Systems to isolate from a network.

The selection runs in two stages:

1. Greedy ranking.  Every System gets a weighted score that blends the chosen
   criterion (load or priority) with its network impact.  The top
   ``batch_size`` Systems form the initial batch.

2. Bounded local search.  A window of ``batch_size`` consecutive Systems is
   slid over the ranked list for at most ``search_windows`` positions.  The
   window leaving the highest average impact among the remaining Systems
   wins.  A window only replaces the current best on strict improvement.

The result is a heuristic: it is not a globally optimal selection and is not
meant to be.  The isolator is deterministic and never mutates its inputs;
the selected Systems are the caller's own objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from core.entities import Connector, Interface, System
from core.network_index import NetworkIndex
from isolation.scoring import (
    CRITERIA,
    CRITERION_WEIGHT,
    IMPACT_BASELINE,
    IMPACT_SCALE,
    IMPACT_WEIGHT,
    criterion_value,
    network_stability,
    weighted_scores,
)


@dataclass(frozen=True)
class IsolationParameters:
    """
    Tuning parameters for batch isolation.

    Attributes
    ----------
    batch_size : int
        Number of Systems to isolate. Must be positive; capped at the number
        of available Systems.
    criterion : str
        ``"load"`` or ``"priority"``.
    criterion_weight : float
        Weight of the criterion value in the score.
    impact_weight : float
        Weight of the impact term in the score.
    impact_baseline : float
        Value the impact term starts from.
    impact_scale : float
        Score penalty per reachable Interface.
    search_windows : int
        Maximum number of sliding windows evaluated by the local search.
    """
    batch_size: int
    criterion: str = "load"
    criterion_weight: float = CRITERION_WEIGHT
    impact_weight: float = IMPACT_WEIGHT
    impact_baseline: float = IMPACT_BASELINE
    impact_scale: float = IMPACT_SCALE
    search_windows: int = 5

    def __post_init__(self) -> None:
        """Validate parameters after initialisation."""
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.criterion not in CRITERIA:
            raise ValueError(
                f"criterion must be one of {CRITERIA}, got {self.criterion!r}"
            )
        if self.criterion_weight < 0:
            raise ValueError(
                f"criterion_weight must be non-negative, got {self.criterion_weight}"
            )
        if self.impact_weight < 0:
            raise ValueError(
                f"impact_weight must be non-negative, got {self.impact_weight}"
            )
        if self.search_windows < 0:
            raise ValueError(
                f"search_windows must be non-negative, got {self.search_windows}"
            )


@dataclass
class IsolationResult:
    """
    Outcome of one isolation request.

    Attributes
    ----------
    selected : list[System]
        Systems of the winning batch, in descending score order.
    stability : float
        Average impact of the non-selected Systems for the winning batch.
        NaN if the batch covers every System.
    initial_stability : float
        Stability of the initial greedy batch.
    window_offset : int
        Start position of the winning batch in the ranked list.
    n_windows_evaluated : int
        Number of sliding windows examined by the local search.
    ranked_ids : list[str]
        System ids sorted by descending weighted score.
    scores : NDArray[np.float64]
        Weighted scores in the order of *ranked_ids*.
    """
    selected: List[System]
    stability: float
    initial_stability: float
    window_offset: int
    n_windows_evaluated: int
    ranked_ids: List[str] = field(default_factory=list)
    scores: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(0, dtype=np.float64)
    )

    @property
    def n_selected(self) -> int:
        """Return the number of selected Systems."""
        return len(self.selected)

    @property
    def selected_ids(self) -> List[str]:
        """Return the ids of the selected Systems."""
        return [s.id for s in self.selected]

    @property
    def improved(self) -> bool:
        """Check if the local search replaced the initial batch."""
        return self.window_offset != 0


def rank_systems(
    systems: Sequence[System],
    index: NetworkIndex,
    params: IsolationParameters,
) -> tuple[List[System], NDArray[np.float64]]:
    """
    Rank Systems by descending weighted score.

    Systems are first ordered by the raw criterion, then by the weighted
    score.  Both sorts are stable, so equal scores keep the criterion order
    and equal criteria keep the input order.

    Returns
    -------
    ranked : list[System]
        Systems in descending score order.
    scores : NDArray[np.float64]
        Weighted score of each ranked System.
    """
    if not systems:
        return [], np.zeros(0, dtype=np.float64)

    raw = np.array(
        [criterion_value(s, params.criterion) for s in systems], dtype=np.float64
    )
    scores = weighted_scores(
        systems,
        index,
        params.criterion,
        criterion_weight=params.criterion_weight,
        impact_weight=params.impact_weight,
        impact_baseline=params.impact_baseline,
        impact_scale=params.impact_scale,
    )

    order = np.argsort(-raw, kind="stable")
    order = order[np.argsort(-scores[order], kind="stable")]

    return [systems[k] for k in order], scores[order]


def isolate(
    systems: Sequence[System],
    connectors: Sequence[Connector],
    interfaces: Sequence[Interface],
    params: IsolationParameters,
) -> IsolationResult:
    """
    Select a batch of Systems to isolate.

    Parameters
    ----------
    systems : sequence of System
        All Systems of the network.
    connectors : sequence of Connector
        All Connectors of the network.
    interfaces : sequence of Interface
        All Interfaces of the network.
    params : IsolationParameters
        Batch size, criterion and score weights.

    Returns
    -------
    IsolationResult
        Winning batch and search diagnostics.
    """
    index = NetworkIndex(systems, connectors, interfaces)
    ranked, scores = rank_systems(systems, index, params)
    ranked_ids = [s.id for s in ranked]

    n = len(ranked)
    size = min(params.batch_size, n)
    if size == 0:
        return IsolationResult(
            selected=[],
            stability=float("nan"),
            initial_stability=float("nan"),
            window_offset=0,
            n_windows_evaluated=0,
            ranked_ids=ranked_ids,
            scores=scores,
        )

    best_offset = 0
    best_stability = network_stability(set(ranked_ids[:size]), systems, index)
    initial_stability = best_stability

    # Windows end at size, size + 1, ... and never reach the end of the list.
    n_windows = 0
    for end in range(size, min(size + params.search_windows, n)):
        start = end - size
        stability = network_stability(set(ranked_ids[start:end]), systems, index)
        n_windows += 1
        if stability > best_stability:
            best_stability = stability
            best_offset = start

    return IsolationResult(
        selected=ranked[best_offset:best_offset + size],
        stability=best_stability,
        initial_stability=initial_stability,
        window_offset=best_offset,
        n_windows_evaluated=n_windows,
        ranked_ids=ranked_ids,
        scores=scores,
    )


def isolate_batch(
    systems: Sequence[System],
    connectors: Sequence[Connector],
    interfaces: Sequence[Interface],
    batch_size: int,
    criterion: str,
) -> List[System]:
    """
    Select up to *batch_size* Systems to isolate.

    Parameters
    ----------
    systems : sequence of System
        All Systems of the network.
    connectors : sequence of Connector
        All Connectors of the network.
    interfaces : sequence of Interface
        All Interfaces of the network.
    batch_size : int
        Requested batch size (>= 1).
    criterion : str
        ``"load"`` or ``"priority"``.

    Returns
    -------
    list[System]
        ``min(batch_size, len(systems))`` Systems, in descending score order
        within the winning window.  Empty when *systems* is empty.

    Raises
    ------
    ValueError
        If *batch_size* is not positive or *criterion* is unknown.
    """
    params = IsolationParameters(batch_size=batch_size, criterion=criterion)
    return isolate(systems, connectors, interfaces, params).selected
