"""Disk geometry — configuration and input validation.

The scheduling functions in ``py_seek.disk`` trust their input.  This
module is where callers check it first:

- **DiskGeometry** — the size of the simulated disk plus helpers to
  validate request lists and clamp head positions.
- **InvalidGeometryError** / **InvalidRequestError** — raised when the
  disk size, head or requests make no physical sense.
- **random_requests** — a random workload for demos and comparisons.

A disk smaller than ``MIN_MAX_CYLINDER`` is rejected: with only a few
dozen cylinders the policies produce near-identical schedules and the
comparison stops being interesting.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeGuard

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_MAX_CYLINDER = 199
MIN_MAX_CYLINDER = 100
DEFAULT_HEAD = 53
DEFAULT_REQUESTS = (98, 183, 37, 122, 14, 124, 65, 67)

# Size range of a random workload (inclusive).
MIN_RANDOM_REQUESTS = 5
MAX_RANDOM_REQUESTS = 10


class InvalidGeometryError(ValueError):
    """Raise when the disk size or head position is impossible."""


class InvalidRequestError(ValueError):
    """Raise when a request list contains an unusable cylinder."""


@dataclass(frozen=True)
class DiskGeometry:
    """The shape of the simulated disk.

    Cylinders run from 0 to ``max_cylinder`` inclusive.

    Args:
        max_cylinder: Highest addressable cylinder.

    Raises:
        InvalidGeometryError: If ``max_cylinder`` is not an int of at
            least ``MIN_MAX_CYLINDER``.

    """

    max_cylinder: int = DEFAULT_MAX_CYLINDER

    def __post_init__(self) -> None:
        """Reject disks too small to schedule on."""
        if not is_integer(self.max_cylinder):
            msg = f"max cylinder must be an integer, got {self.max_cylinder!r}"
            raise InvalidGeometryError(msg)
        if self.max_cylinder < MIN_MAX_CYLINDER:
            msg = f"max cylinder must be at least {MIN_MAX_CYLINDER}, got {self.max_cylinder}"
            raise InvalidGeometryError(msg)

    @property
    def cylinders(self) -> int:
        """Return the number of cylinders on the disk."""
        return self.max_cylinder + 1

    def contains(self, cylinder: int) -> bool:
        """Return True if *cylinder* lies on this disk."""
        return 0 <= cylinder <= self.max_cylinder

    def clamp_head(self, head: int) -> int:
        """Pull *head* back onto the disk instead of rejecting it."""
        return max(0, min(self.max_cylinder, head))

    def validate_head(self, head: object) -> int:
        """Return *head* if it is a cylinder on this disk.

        Raises:
            InvalidGeometryError: If *head* is not an int in range.

        """
        if not is_integer(head):
            msg = f"head position must be an integer, got {head!r}"
            raise InvalidGeometryError(msg)
        if not self.contains(head):
            msg = f"head position {head} is outside 0-{self.max_cylinder}"
            raise InvalidGeometryError(msg)
        return head

    def validate_requests(self, requests: Sequence[object]) -> list[int]:
        """Return *requests* as a list if every cylinder is usable.

        Each request must be an int on this disk, and no cylinder may
        be requested twice.

        Raises:
            InvalidRequestError: On the first offending request.

        """
        valid: list[int] = []
        for request in requests:
            if not is_integer(request):
                msg = f"request must be an integer cylinder, got {request!r}"
                raise InvalidRequestError(msg)
            if not self.contains(request):
                msg = f"request {request} is outside 0-{self.max_cylinder}"
                raise InvalidRequestError(msg)
            if request in valid:
                msg = f"cylinder {request} is already queued"
                raise InvalidRequestError(msg)
            valid.append(request)
        return valid


def is_integer(value: object) -> TypeGuard[int]:
    """Return True for real ints; JSON booleans are not cylinders."""
    return isinstance(value, int) and not isinstance(value, bool)


def random_requests(
    geometry: DiskGeometry,
    *,
    head: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Generate a random workload of distinct cylinders.

    Between ``MIN_RANDOM_REQUESTS`` and ``MAX_RANDOM_REQUESTS``
    cylinders are drawn from the whole disk, never equal to *head*.

    Args:
        geometry: Disk to draw cylinders from.
        head: Current head position to avoid.
        rng: Source of randomness; pass a seeded ``Random`` for
            repeatable workloads.

    """
    rng = rng or random.Random()  # noqa: S311
    count = rng.randint(MIN_RANDOM_REQUESTS, MAX_RANDOM_REQUESTS)
    chosen: list[int] = []
    while len(chosen) < count:
        cylinder = rng.randint(0, geometry.max_cylinder)
        if cylinder != head and cylinder not in chosen:
            chosen.append(cylinder)
    return chosen
