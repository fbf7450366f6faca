"""Tests for cli/exit_codes.py module."""

from condlang.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        assert 1 <= ExitCode.GENERAL_ERROR <= 9
        assert 1 <= ExitCode.INTERRUPTED <= 9
        assert 10 <= ExitCode.INVALID_INPUT <= 19
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 60 <= ExitCode.CONDITION_FALSE <= 69
