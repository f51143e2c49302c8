"""Tests for the command-line entry point.

``main()`` returns an exit status instead of calling ``sys.exit`` so
the whole flow — argument checks, file loading, report printing — can
be driven in-process with ``capsys``.
"""

from pathlib import Path

import pytest

from py_disksched.cli import ArgumentError, main, parse_direction, parse_start
from py_disksched.disk import Direction
from py_disksched.requests import dump_requests

_TEXTBOOK_REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]


def _request_file(tmp_path: Path, requests: list[int] | None = None) -> Path:
    """Write a request file and return its path."""
    path = tmp_path / "request.bin"
    dump_requests(path, requests if requests is not None else _TEXTBOOK_REQUESTS)
    return path


def _textbook_args(path: Path, *extra: str) -> list[str]:
    """Arguments for the textbook example on a 200-cylinder disk."""
    return ["53", "RIGHT", "--file", str(path), "--count", "8", "--cylinders", "200", *extra]


class TestParseStart:
    """The initial head position must be an on-disk integer."""

    def test_valid(self) -> None:
        """In-range integers pass through."""
        expected = 299
        assert parse_start("299", cylinders=300) == expected
        assert parse_start("0", cylinders=300) == 0

    @pytest.mark.parametrize("text", ["300", "-1", "abc", "", "1_0", " 10", "10\n", "\u0661\u0660"])
    def test_invalid(self, text: str) -> None:
        """Out-of-range values and anything but plain ASCII digits are refused."""
        with pytest.raises(ArgumentError, match="between 0 and 299"):
            parse_start(text, cylinders=300)


class TestParseDirection:
    """Only the literal tokens LEFT and RIGHT are accepted."""

    def test_valid(self) -> None:
        """Both tokens map onto the enum."""
        assert parse_direction("LEFT") is Direction.LEFT
        assert parse_direction("RIGHT") is Direction.RIGHT

    @pytest.mark.parametrize("text", ["left", "UP", ""])
    def test_invalid(self, text: str) -> None:
        """Anything else is refused."""
        with pytest.raises(ArgumentError, match="LEFT or RIGHT"):
            parse_direction(text)


class TestMain:
    """End-to-end runs of the CLI."""

    def test_success(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid run prints every policy and exits 0."""
        status = main(_textbook_args(_request_file(tmp_path)))
        out = capsys.readouterr().out
        assert status == 0
        assert "Total requests = 8" in out
        assert "Direction of Head: RIGHT" in out
        for name in ("FCFS", "SSTF", "SCAN", "C-SCAN", "LOOK", "C-LOOK"):
            assert f"{name} DISK SCHEDULING ALGORITHM:" in out
        assert "FCFS - Total head movements = 640" in out
        assert "SSTF - Total head movements = 236" in out
        assert "C-LOOK - Total head movements = 322" in out

    def test_bad_direction(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown direction is fatal with a diagnostic."""
        status = main(["53", "UP", "--file", str(_request_file(tmp_path)), "--count", "8"])
        assert status == 1
        assert "ERROR: Direction must be LEFT or RIGHT." in capsys.readouterr().err

    def test_bad_start(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A head off the disk is fatal with a diagnostic."""
        status = main(["300", "LEFT", "--file", str(_request_file(tmp_path)), "--count", "8"])
        assert status == 1
        assert "ERROR: Initial head must be between 0 and 299." in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing request file is fatal with a diagnostic."""
        status = main(["53", "LEFT", "--file", str(tmp_path / "none.bin")])
        assert status == 1
        assert "ERROR: Cannot open" in capsys.readouterr().err

    def test_short_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The default batch size is 20, so 8 requests are not enough."""
        status = main(["53", "LEFT", "--file", str(_request_file(tmp_path))])
        assert status == 1
        assert "Could not read all requests" in capsys.readouterr().err

    def test_bad_cylinders(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A disk needs at least one cylinder."""
        status = main(["0", "LEFT", "--file", str(_request_file(tmp_path)), "--cylinders", "0"])
        assert status == 1
        assert "Cylinder count must be between 1 and" in capsys.readouterr().err

    def test_cylinders_beyond_32_bits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A disk too large for the request file layout is an input error."""
        path = tmp_path / "request.bin"
        argv = ["5", "LEFT", "--file", str(path), "--generate", "--seed", "1"]
        status = main([*argv, "--cylinders", "5000000000"])
        assert status == 1
        assert "ERROR: Cylinder count must be between 1 and" in capsys.readouterr().err
        assert not path.exists()

    def test_largest_disk_accepted(self, tmp_path: Path) -> None:
        """2**31 cylinders still fit: the last one is the int32 maximum."""
        path = tmp_path / "request.bin"
        argv = ["5", "LEFT", "--file", str(path), "--generate", "--seed", "1"]
        assert main([*argv, "--cylinders", str(2**31), "--count", "3"]) == 0

    def test_generate(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--generate writes a fresh 20-request file before running."""
        path = tmp_path / "request.bin"
        status = main(["150", "LEFT", "--file", str(path), "--generate", "--seed", "3"])
        assert status == 0
        request_bytes = 80
        assert path.stat().st_size == request_bytes
        assert "Total requests = 20" in capsys.readouterr().out

    def test_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--summary appends the comparison table."""
        main(_textbook_args(_request_file(tmp_path), "--summary"))
        assert "POLICY" in capsys.readouterr().out

    def test_quiet_by_default(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Without -v nothing from the run log reaches stderr."""
        main(_textbook_args(_request_file(tmp_path)))
        assert capsys.readouterr().err == ""

    def test_verbose(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """-v dumps INFO entries but hides DEBUG ones."""
        main(_textbook_args(_request_file(tmp_path), "--verbose"))
        err = capsys.readouterr().err
        assert "[INFO] requests: loaded 8 requests" in err
        assert "[INFO] disk: C-LOOK" in err
        assert "[DEBUG]" not in err

    def test_very_verbose(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """-vv adds the DEBUG entries."""
        main(_textbook_args(_request_file(tmp_path), "-vv"))
        err = capsys.readouterr().err
        assert "[DEBUG] disk: scheduling 8 requests from 53 heading RIGHT" in err
        assert "[INFO] disk: C-LOOK" in err
