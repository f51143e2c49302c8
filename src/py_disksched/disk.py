"""Disk scheduling algorithms — minimising seek time for I/O requests.

When several requests for disk I/O are pending, the disk arm must move
between cylinders to service them.  The dominant cost is **seek time**,
measured here as the number of cylinders the head crosses.  A disk
scheduling policy decides the *order* in which requests are serviced.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — ride to the top floor, then all the way back down.
    - **C-SCAN** — ride to the top, drop to the ground floor, ride up again.
    - **LOOK** — like SCAN, but turn around at the last requested floor.
    - **C-LOOK** — like C-SCAN, but jump straight to the lowest request.

Every policy returns a ``ServiceResult``: the visiting order plus the
total head movement.  SCAN and C-SCAN travel to the physical edge of
the disk, so their sequences include synthetic boundary cylinders
(``0`` and/or ``max_cylinder``) that were never requested.

All policies implement the ``DiskPolicy`` protocol (Strategy pattern);
``DiskScheduler`` binds a request set to the six of them.
"""

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from py_disksched.config import NUM_CYLINDERS
from py_disksched.logging import Logger

_SOURCE = "disk"


class DiskError(Exception):
    """Raise when a request or head position lies outside the disk."""


class Direction(StrEnum):
    """Initial sweep direction of the head.

    LEFT moves toward cylinder 0, RIGHT toward the highest cylinder.
    FCFS and SSTF ignore it.
    """

    LEFT = "LEFT"
    RIGHT = "RIGHT"


def total_movement(sequence: Sequence[int], *, head: int) -> int:
    """Return the cylinders crossed servicing *sequence* from *head*.

    This is the sum of ``|next - current|`` over ``[head, *sequence]``.
    An empty sequence costs nothing.
    """
    total = 0
    current = head
    for cylinder in sequence:
        total += abs(cylinder - current)
        current = cylinder
    return total


def split_index(sorted_requests: Sequence[int], head: int) -> int:
    """Return the index of the first request at or above *head*.

    Args:
        sorted_requests: Requests in ascending order.
        head: Current head position.

    Returns:
        The split point; ``len(sorted_requests)`` when every request
        lies below the head.

    """
    return bisect_left(sorted_requests, head)


@dataclass(frozen=True)
class ServiceResult:
    """The outcome of one policy invocation.

    Attributes:
        sequence: Cylinders in the order the head visits them.
        movement: Total head movement in cylinders.

    """

    sequence: tuple[int, ...]
    movement: int

    @classmethod
    def from_sequence(cls, sequence: Sequence[int], *, head: int) -> "ServiceResult":
        """Build a result, charging movement from *head*."""
        return cls(sequence=tuple(sequence), movement=total_movement(sequence, head=head))


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    name: str

    def schedule(
        self,
        requests: Sequence[int],
        *,
        head: int,
        direction: Direction,
    ) -> ServiceResult:
        """Return the service order and movement for *requests*.

        Args:
            requests: Cylinder numbers in arrival order.
            head: Current position of the disk head.
            direction: Initial sweep direction.

        Returns:
            A fresh ServiceResult.

        """
        ...


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    Fair (no starvation), but the arm zigzags across the disk.  This
    is the baseline the other policies are measured against.
    """

    name = "FCFS"

    def schedule(
        self,
        requests: Sequence[int],
        *,
        head: int,
        direction: Direction,  # noqa: ARG002
    ) -> ServiceResult:
        """Return requests in their original order."""
        return ServiceResult.from_sequence(requests, head=head)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises each individual seek.  It can
    **starve** distant requests when new ones keep arriving near the
    head, but for a fixed batch it usually beats FCFS by a wide margin.

    When two requests are equally close, the one that arrived first
    wins, so output is reproducible.
    """

    name = "SSTF"

    def schedule(
        self,
        requests: Sequence[int],
        *,
        head: int,
        direction: Direction,  # noqa: ARG002
    ) -> ServiceResult:
        """Return requests ordered nearest-first from the moving head."""
        remaining = list(requests)
        order: list[int] = []
        current = head
        while remaining:
            # min() keeps the first of equal keys: earliest arrival wins ties.
            nearest = min(remaining, key=lambda r: abs(r - current))
            order.append(nearest)
            remaining.remove(nearest)
            current = nearest
        return ServiceResult.from_sequence(order, head=head)


class _SweepPolicy:
    """Shared machinery for SCAN, C-SCAN, LOOK and C-LOOK.

    A run passes through four states: the primary leg (sweeping in the
    initial direction), the boundary-or-wrap point, the secondary leg,
    and done.  Requests are split at the first one at or above the
    head; the primary leg takes the side the head is facing.

    Subclasses choose two things:
        - ``circular`` — whether the secondary leg keeps the original
          direction (C-SCAN, C-LOOK) or reverses (SCAN, LOOK).
        - ``_boundaries()`` — synthetic cylinders emitted at the turn.
    """

    name = ""
    circular = False

    def _boundaries(self, direction: Direction) -> list[int]:  # noqa: ARG002
        return []

    def schedule(
        self,
        requests: Sequence[int],
        *,
        head: int,
        direction: Direction,
    ) -> ServiceResult:
        """Return requests in sweep order (input need not be sorted)."""
        ordered = sorted(requests)
        split = split_index(ordered, head)
        below, above = ordered[:split], ordered[split:]

        if direction == Direction.LEFT:
            primary = below[::-1]
            secondary = above[::-1] if self.circular else above
        else:
            primary = above
            secondary = below if self.circular else below[::-1]

        sequence = [*primary, *self._boundaries(direction), *secondary]
        return ServiceResult.from_sequence(sequence, head=head)


class SCANPolicy(_SweepPolicy):
    """SCAN (elevator) — sweep to the edge of the disk, then reverse.

    The arm services everything in its path, keeps going to the
    physical boundary even when nothing is waiting there, then turns
    round and services the rest.  No request waits more than two full
    sweeps.

    Args:
        max_cylinder: Highest cylinder number on the disk.

    """

    name = "SCAN"

    def __init__(self, *, max_cylinder: int = NUM_CYLINDERS - 1) -> None:
        """Create a SCAN policy for a disk ending at *max_cylinder*."""
        self._max_cylinder = max_cylinder

    def _boundaries(self, direction: Direction) -> list[int]:
        return [0] if direction == Direction.LEFT else [self._max_cylinder]


class CSCANPolicy(_SweepPolicy):
    """Circular SCAN — sweep to the edge, jump to the other edge, continue.

    Requests are only ever serviced while moving in one direction.
    The return trip is recorded as two synthetic stops: the edge the
    sweep reached and the opposite edge the head jumps to.  Wait times
    are more uniform than SCAN because middle cylinders are no longer
    passed twice per cycle.

    Args:
        max_cylinder: Highest cylinder number on the disk.

    """

    name = "C-SCAN"
    circular = True

    def __init__(self, *, max_cylinder: int = NUM_CYLINDERS - 1) -> None:
        """Create a C-SCAN policy for a disk ending at *max_cylinder*."""
        self._max_cylinder = max_cylinder

    def _boundaries(self, direction: Direction) -> list[int]:
        if direction == Direction.LEFT:
            return [0, self._max_cylinder]
        return [self._max_cylinder, 0]


class LOOKPolicy(_SweepPolicy):
    """LOOK — SCAN that turns around at the last request.

    The arm only travels as far as the outermost pending request in
    each direction, so the sequence never contains synthetic stops.
    """

    name = "LOOK"


class CLOOKPolicy(_SweepPolicy):
    """C-LOOK — C-SCAN without the trips to the physical edges.

    After the last request in the sweep direction, the head jumps
    straight to the furthest request on the other side and carries on
    in the same direction.
    """

    name = "C-LOOK"
    circular = True


def default_policies(*, max_cylinder: int = NUM_CYLINDERS - 1) -> list[DiskPolicy]:
    """Return the six policies in reporting order."""
    return [
        FCFSPolicy(),
        SSTFPolicy(),
        SCANPolicy(max_cylinder=max_cylinder),
        CSCANPolicy(max_cylinder=max_cylinder),
        LOOKPolicy(),
        CLOOKPolicy(),
    ]


@dataclass(frozen=True)
class PolicyRun:
    """A named result, ready for a report."""

    name: str
    result: ServiceResult


class DiskScheduler:
    """Disk scheduler — ties a batch of requests to a set of policies.

    The scheduler checks once that every request lies on the disk, so
    the policies themselves never deal with invalid input.  It keeps
    no state between runs: the same head and direction always give the
    same results.
    """

    def __init__(
        self,
        requests: Sequence[int],
        *,
        max_cylinder: int = NUM_CYLINDERS - 1,
        policies: Sequence[DiskPolicy] | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a scheduler for *requests* on a disk ending at *max_cylinder*.

        Raises:
            DiskError: If any request lies outside ``[0, max_cylinder]``.

        """
        for cylinder in requests:
            if not 0 <= cylinder <= max_cylinder:
                msg = f"Request {cylinder} is outside cylinders 0-{max_cylinder}"
                raise DiskError(msg)
        self._requests = tuple(requests)
        self._max_cylinder = max_cylinder
        self._policies = (
            list(policies) if policies is not None else default_policies(max_cylinder=max_cylinder)
        )
        self._logger = logger if logger is not None else Logger()

    @property
    def requests(self) -> tuple[int, ...]:
        """Return the requests in arrival order."""
        return self._requests

    @property
    def max_cylinder(self) -> int:
        """Return the highest cylinder on the disk."""
        return self._max_cylinder

    @property
    def policies(self) -> list[DiskPolicy]:
        """Return the configured policies in reporting order."""
        return list(self._policies)

    @property
    def logger(self) -> Logger:
        """Return the log buffer runs are recorded in."""
        return self._logger

    def run(self, policy: DiskPolicy, *, head: int, direction: Direction) -> PolicyRun:
        """Run one policy over the request batch.

        Raises:
            DiskError: If *head* lies outside the disk.

        """
        if not 0 <= head <= self._max_cylinder:
            msg = f"Head {head} is outside cylinders 0-{self._max_cylinder}"
            raise DiskError(msg)
        result = policy.schedule(self._requests, head=head, direction=direction)
        self._logger.info(
            f"{policy.name}: {len(result.sequence)} stops, movement {result.movement}",
            source=_SOURCE,
        )
        return PolicyRun(name=policy.name, result=result)

    def run_all(self, *, head: int, direction: Direction) -> list[PolicyRun]:
        """Run every configured policy in order."""
        self._logger.debug(
            f"scheduling {len(self._requests)} requests from {head} heading {direction}",
            source=_SOURCE,
        )
        return [self.run(policy, head=head, direction=direction) for policy in self._policies]
