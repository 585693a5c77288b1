"""Tests for the `celo-tx classify` click CLI."""

import json
import logging
from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner, Result

from ...logging import UTCFormatter
from ..classify import classify_command
from ..main import celo_tx

FEE_CURRENCY = "0x765de816845861e75a25fca122bb6898b8b1282a"

RECORDS = [
    {"maxFeePerGas": "0x7b", "maxPriorityFeePerGas": "0x1c8"},
    {
        "feeCurrency": FEE_CURRENCY,
        "maxFeePerGas": 123,
        "maxPriorityFeePerGas": 456,
    },
    {"gatewayFee": 789, "maxFeePerGas": 123, "maxPriorityFeePerGas": 456},
    {"gasPrice": "0x1", "nonce": 0},
]


@pytest.fixture
def expected_exit_code() -> int:
    return 0


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo the logging configuration applied by the command."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, UTCFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)


class TestClassifyClickCli:
    """Test the classify command using Click CLI."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Provide a Click CliRunner for invoking command-line interfaces."""
        return CliRunner()

    @pytest.fixture
    def run_classify(
        self, runner: CliRunner, expected_exit_code: int
    ) -> Callable[..., Result]:
        """Provide a function to run the classify command."""

        def _run_classify(
            *args: str, input: str | bytes | None = None
        ) -> Result:
            result = runner.invoke(classify_command, args, input=input)
            assert result.exit_code == expected_exit_code, (
                f"Invalid exit code, {result.exit_code}, "
                f"expected {expected_exit_code}, "
                f"output: {result.output}, "
                f"command-line args: {args}"
            )
            return result

        return _run_classify

    def test_classify_help(self, run_classify: Callable[..., Result]) -> None:
        """Test the `--help` option of the `classify` command."""
        result = run_classify("--help")
        assert "[RECORDS_FILE]" in result.output
        assert "--json" in result.output
        assert "--log-level" in result.output

    def test_classify_stdin(self, run_classify: Callable[..., Result]) -> None:
        """Test classifying an array of records read from stdin."""
        result = run_classify(input=json.dumps(RECORDS))
        assert result.stdout.splitlines() == [
            "eip1559",
            "cip64",
            "cip42",
            "legacy",
        ]

    def test_classify_file(
        self, run_classify: Callable[..., Result], tmp_path: Path
    ) -> None:
        """Test classifying a single record read from a file."""
        records_file = tmp_path / "tx.json"
        records_file.write_text(json.dumps({"type": "cip42"}))
        result = run_classify(str(records_file))
        assert result.stdout == "cip42\n"

    def test_classify_json_output(
        self, run_classify: Callable[..., Result]
    ) -> None:
        """Test the `--json` output format."""
        result = run_classify("--json", "-", input=json.dumps(RECORDS))
        lines = [json.loads(line) for line in result.stdout.splitlines()]
        assert lines == [
            {"variant": "eip1559", "envelopeType": "0x02"},
            {"variant": "cip64", "envelopeType": "0x7b"},
            {"variant": "cip42", "envelopeType": "0x7c"},
            {"variant": "legacy", "envelopeType": "0x00"},
        ]

    def test_classify_verbose_logs(
        self, run_classify: Callable[..., Result]
    ) -> None:
        """Test that VERBOSE logging reports each decision on stderr."""
        result = run_classify(
            "--log-level", "verbose", input=json.dumps(RECORDS[:1])
        )
        assert result.stdout == "eip1559\n"
        assert "[VERBOSE] celo_tx.variants" in result.stderr

    @pytest.mark.parametrize(
        "input_text, message",
        [
            pytest.param("{not json", "invalid JSON", id="invalid_json"),
            pytest.param(
                "42", "expected a JSON object or an array", id="number"
            ),
            pytest.param(
                '[{"gatewayFee": 1}, "cip42"]',
                "record 1 is a str, not an object",
                id="array_with_string",
            ),
            pytest.param(
                b"\xff\xfe{}", "input is not UTF-8", id="not_utf8"
            ),
        ],
    )
    @pytest.mark.parametrize("expected_exit_code", [1])
    def test_classify_bad_input(
        self,
        run_classify: Callable[..., Result],
        input_text: str | bytes,
        message: str,
    ) -> None:
        """Test that unreadable input fails with a message."""
        result = run_classify(input=input_text)
        assert message in result.output

    @pytest.mark.parametrize("expected_exit_code", [2])
    def test_classify_bad_log_level(
        self, run_classify: Callable[..., Result]
    ) -> None:
        """Test that an unknown log level is a usage error."""
        result = run_classify("--log-level", "chatty", input="{}")
        assert "Invalid log level 'chatty'" in result.output


def test_group_dispatches_classify() -> None:
    """Test that `celo-tx classify` is reachable through the group."""
    result = CliRunner().invoke(
        celo_tx, ["classify"], input=json.dumps({"type": "cip64"})
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == "cip64\n"


def test_group_version() -> None:
    """Test the `--version` option of the group."""
    result = CliRunner().invoke(celo_tx, ["--version"])
    assert result.exit_code == 0
    assert "celo-tx, version" in result.output
