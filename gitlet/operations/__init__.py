"""Operations module for high-level Gitlet operations.

This module contains:
- Working-tree synchronization (checkout, reset, restore)
- Status computation
"""

from gitlet.operations.checkout import WorkingTreeSync, CheckoutPlan
from gitlet.operations.status import StatusReport, compute_status

__all__ = [
    'WorkingTreeSync', 'CheckoutPlan',
    'StatusReport', 'compute_status',
]
