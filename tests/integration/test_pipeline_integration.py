import logging

import pytest
from click.testing import CliRunner, Result

from b64map.config.settings import Settings
from b64map.exit_codes import ExitCode
from b64map.main import main
from tests.helpers import decode_lines, encode_lines

UPPERCASE = "import sys; sys.stdout.buffer.write(sys.stdin.buffer.read().upper())"
ECHO_WITH_NOTE = (
    "import sys; data = sys.stdin.buffer.read(); "
    "sys.stderr.buffer.write(b'note: ' + str(len(data)).encode() + b'\\n'); "
    "sys.stdout.buffer.write(data)"
)
FAIL_ON_BOOM = (
    "import sys; data = sys.stdin.buffer.read(); "
    "sys.exit(3) if data == b'boom' else sys.stdout.buffer.write(data)"
)
# Writes far more than a pipe buffer holds before reading any input.
CHATTY = "import sys; sys.stdout.buffer.write(b'x' * 1048576); sys.stdin.buffer.read()"


def _run(args: list[str], stdin: bytes) -> Result:
    return CliRunner().invoke(main, args, input=stdin)


@pytest.mark.integration
class TestIdentityRoundTrip:
    def test_example_hello_world(
        self, settings: Settings, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="b64map")

        result = _run(["cat"], b"SGVsbG8=\nV29ybGQ=\n")

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout_bytes == b"SGVsbG8=\nV29ybGQ=\n"
        assert "processed 2 documents" in caplog.text

    def test_round_trips_arbitrary_bytes(self, settings: Settings) -> None:
        documents = [b"", b"\x00\x01\x02", bytes(range(256)) * 100, b"line\nbreaks\r\n"]

        result = _run(["cat"], encode_lines(*documents))

        assert result.exit_code == ExitCode.SUCCESS
        assert decode_lines(result.stdout_bytes) == documents

    def test_line_count_is_preserved(self, settings: Settings) -> None:
        documents = [str(i).encode() for i in range(25)]

        result = _run(["-p", "10", "cat"], encode_lines(*documents))

        assert result.stdout_bytes.count(b"\n") == 25

    def test_final_line_without_terminator(self, settings: Settings) -> None:
        result = _run(["cat"], b"SGVsbG8=\nV29ybGQ=")

        assert result.stdout_bytes == b"SGVsbG8=\nV29ybGQ=\n"

    def test_crlf_input_and_output(self, settings: Settings) -> None:
        result = _run(["--crlf", "cat"], encode_lines(b"a", b"b", terminator=b"\r\n"))

        assert result.stdout_bytes == encode_lines(b"a", b"b", terminator=b"\r\n")


@pytest.mark.integration
class TestTransformation:
    def test_program_arguments_are_passed(self, settings: Settings, python_filter: list[str]) -> None:
        result = _run([*python_filter, UPPERCASE], encode_lines(b"hello", b"world"))

        assert result.exit_code == ExitCode.SUCCESS
        assert decode_lines(result.stdout_bytes) == [b"HELLO", b"WORLD"]

    def test_program_stderr_goes_to_stderr_only(
        self, settings: Settings, python_filter: list[str]
    ) -> None:
        result = _run([*python_filter, ECHO_WITH_NOTE], encode_lines(b"abc"))

        assert decode_lines(result.stdout_bytes) == [b"abc"]
        assert b"note: 3\n" in result.stderr_bytes

    @pytest.mark.parametrize("strategy", ["sequential", "concurrent"])
    def test_each_strategy_transforms(
        self, settings: Settings, python_filter: list[str], strategy: str
    ) -> None:
        result = _run(
            ["--strategy", strategy, *python_filter, UPPERCASE],
            encode_lines(b"one", b"two"),
        )

        assert decode_lines(result.stdout_bytes) == [b"ONE", b"TWO"]

    def test_concurrent_strategy_drains_large_early_output(
        self, settings: Settings, python_filter: list[str]
    ) -> None:
        result = _run(
            ["--strategy", "concurrent", *python_filter, CHATTY],
            encode_lines(b"y" * 1048576),
        )

        assert result.exit_code == ExitCode.SUCCESS
        assert decode_lines(result.stdout_bytes) == [b"x" * 1048576]


@pytest.mark.integration
class TestFatalErrors:
    def test_corrupt_line_stops_before_later_lines(self, settings: Settings) -> None:
        stdin = encode_lines(b"first") + b"not*base64\n" + encode_lines(b"third")

        result = _run(["cat"], stdin)

        assert result.exit_code == ExitCode.FAILURE
        assert decode_lines(result.stdout_bytes) == [b"first"]
        assert "fatal: error decoding line 2" in result.stderr

    def test_failing_program_produces_no_line(
        self, settings: Settings, python_filter: list[str]
    ) -> None:
        result = _run([*python_filter, FAIL_ON_BOOM], encode_lines(b"ok", b"boom", b"never"))

        assert result.exit_code == ExitCode.FAILURE
        assert decode_lines(result.stdout_bytes) == [b"ok"]
        assert "exited with status 3" in result.stderr

    def test_false_aborts_the_run(self, settings: Settings) -> None:
        result = _run(["false"], encode_lines(b"a", b"b"))

        assert result.exit_code == ExitCode.FAILURE
        assert result.stdout_bytes == b""

    def test_missing_program_is_fatal(self, settings: Settings) -> None:
        result = _run(["definitely-not-a-real-program-b64map"], encode_lines(b"a"))

        assert result.exit_code == ExitCode.FAILURE
        assert "error starting command" in result.stderr

    def test_empty_input_runs_nothing(self, settings: Settings) -> None:
        result = _run(["false"], b"")

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout_bytes == b""
