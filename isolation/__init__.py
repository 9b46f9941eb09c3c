"""
Isolation Module
================

This module selects batches of Systems to isolate from a network.

Classes
-------
IsolationParameters
    Batch size, criterion and score weights.
IsolationResult
    Winning batch and local-search diagnostics.

Functions
---------
isolate_batch
    Return the Systems selected for isolation.
isolate
    Run the selection and return the full IsolationResult.
system_impact
    Count the distinct Interfaces a System reaches.
network_stability
    Average impact of the Systems left after isolating a batch.
"""

from isolation.batch_isolator import (
    IsolationParameters,
    IsolationResult,
    isolate,
    isolate_batch,
)
from isolation.scoring import network_stability, system_impact

__all__ = [
    "IsolationParameters",
    "IsolationResult",
    "isolate",
    "isolate_batch",
    "network_stability",
    "system_impact",
]
