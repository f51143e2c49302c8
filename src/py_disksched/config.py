"""Disk geometry and run configuration.

The simulated disk is a closed range of cylinders ``[0, cylinders - 1]``.
One run services a fixed number of requests read from a binary request
file.  ``DiskConfig`` bundles those three knobs so the CLI and the web
UI build the engine the same way.
"""

from dataclasses import dataclass, replace
from pathlib import Path

NUM_CYLINDERS = 300
NUM_REQUESTS = 20
REQUEST_FILE = Path("request.bin")


@dataclass(frozen=True)
class DiskConfig:
    """Immutable settings for one scheduling run.

    Attributes:
        cylinders: Total addressable cylinders (positions ``0..cylinders-1``).
        request_count: How many requests make up one unit of work.
        request_file: Where the binary request list lives.

    """

    cylinders: int = NUM_CYLINDERS
    request_count: int = NUM_REQUESTS
    request_file: Path = REQUEST_FILE

    @property
    def max_cylinder(self) -> int:
        """Return the highest valid cylinder number."""
        return self.cylinders - 1

    def with_overrides(
        self,
        *,
        cylinders: int | None = None,
        request_count: int | None = None,
        request_file: Path | None = None,
    ) -> "DiskConfig":
        """Return a copy with any non-``None`` fields replaced."""
        changes: dict[str, object] = {}
        if cylinders is not None:
            changes["cylinders"] = cylinders
        if request_count is not None:
            changes["request_count"] = request_count
        if request_file is not None:
            changes["request_file"] = request_file
        return replace(self, **changes)  # type: ignore[arg-type]
