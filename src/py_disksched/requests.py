"""Request files — the batch of cylinder requests a run services.

A request file is a flat array of fixed-width integers, exactly what
a C program writes with ``fwrite(req, sizeof(int), 20, fp)``: signed
32-bit values in little-endian byte order, no header, no padding.

    - ``load_requests(path, ...)`` — read and validate one batch.
    - ``dump_requests(path, requests)`` — write a batch in the same layout.
    - ``generate_requests(count, ...)`` — random batch for demo runs.

Extra bytes after the last expected value are ignored; a file with too
few values is an error.
"""

import random
import struct
from collections.abc import Sequence
from pathlib import Path

from py_disksched.logging import Logger

_SOURCE = "requests"
_INT = struct.Struct("<i")
# Largest disk whose last cylinder still fits the int32 layout.
MAX_CYLINDERS = 2**31


class RequestSourceError(Exception):
    """Raise when a request file is missing, short, or out of range."""


def load_requests(
    path: Path,
    *,
    count: int,
    max_cylinder: int,
    logger: Logger | None = None,
) -> list[int]:
    """Read *count* requests from a binary request file.

    Args:
        path: The file to read.
        count: How many requests to read.
        max_cylinder: Highest valid cylinder; values above it are rejected.
        logger: Optional log buffer to record the load in.

    Returns:
        The requests in file (arrival) order.

    Raises:
        RequestSourceError: If the file cannot be read, holds fewer than
            *count* values, or a value lies outside ``[0, max_cylinder]``.

    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot open {path}: {exc.strerror or exc}"
        raise RequestSourceError(msg) from exc

    needed = count * _INT.size
    if len(data) < needed:
        msg = f"Could not read all requests: expected {count}, found {len(data) // _INT.size}"
        raise RequestSourceError(msg)

    requests = [value for (value,) in _INT.iter_unpack(data[:needed])]
    for index, cylinder in enumerate(requests):
        if not 0 <= cylinder <= max_cylinder:
            msg = f"Request #{index} ({cylinder}) is outside cylinders 0-{max_cylinder}"
            raise RequestSourceError(msg)

    if logger is not None:
        logger.info(f"loaded {count} requests from {path}", source=_SOURCE)
    return requests


def dump_requests(path: Path, requests: Sequence[int]) -> None:
    """Write *requests* to *path* as little-endian 32-bit integers.

    Raises:
        RequestSourceError: If a request does not fit in 32 bits or the
            file cannot be written.

    """
    try:
        data = b"".join(_INT.pack(cylinder) for cylinder in requests)
    except struct.error as exc:
        msg = f"Requests must fit in a 32-bit signed integer: {exc}"
        raise RequestSourceError(msg) from exc
    try:
        path.write_bytes(data)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc.strerror or exc}"
        raise RequestSourceError(msg) from exc


def generate_requests(
    count: int,
    *,
    max_cylinder: int,
    seed: int | None = None,
    logger: Logger | None = None,
) -> list[int]:
    """Return *count* uniformly random cylinders in ``[0, max_cylinder]``.

    Passing a *seed* makes the batch reproducible.
    """
    rng = random.Random(seed)  # noqa: S311
    requests = [rng.randint(0, max_cylinder) for _ in range(count)]
    if logger is not None:
        logger.debug(f"generated {count} requests (seed={seed})", source=_SOURCE)
    return requests
