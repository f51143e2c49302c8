"""py-disksched — classical disk scheduling on a simulated disk.

Re-exports the engine so callers can write::

    from py_disksched import DiskScheduler, Direction
"""

from py_disksched.disk import (
    CLOOKPolicy,
    CSCANPolicy,
    Direction,
    DiskError,
    DiskPolicy,
    DiskScheduler,
    FCFSPolicy,
    LOOKPolicy,
    PolicyRun,
    SCANPolicy,
    ServiceResult,
    SSTFPolicy,
    default_policies,
    split_index,
    total_movement,
)

__all__ = [
    "CLOOKPolicy",
    "CSCANPolicy",
    "Direction",
    "DiskError",
    "DiskPolicy",
    "DiskScheduler",
    "FCFSPolicy",
    "LOOKPolicy",
    "PolicyRun",
    "SCANPolicy",
    "SSTFPolicy",
    "ServiceResult",
    "default_policies",
    "split_index",
    "total_movement",
]
