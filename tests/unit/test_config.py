"""Tests for run configuration parsing."""

import pytest

from config import RunConfig
from errors import UsageError


class TestRunConfig:
    def test_positional_arguments(self) -> None:
        config = RunConfig.from_argv(["1000", "0", "4"], environ={})
        assert (config.samples, config.function_id, config.threads) == (1000, 0, 4)
        assert not config.debug
        assert not config.verbose
        assert config.seed is None

    @pytest.mark.parametrize("argv", [[], ["1"], ["1", "0"], ["1", "0", "1", "x"]])
    def test_wrong_argument_count(self, argv) -> None:
        with pytest.raises(UsageError):
            RunConfig.from_argv(argv, environ={})

    def test_non_integer_argument(self) -> None:
        with pytest.raises(UsageError, match="N_THREADS"):
            RunConfig.from_argv(["10", "0", "many"], environ={})

    def test_environment_toggles(self) -> None:
        env = {
            "MONTE_CARLO_DEBUG": "1",
            "MONTE_CARLO_VERBOSE": "yes",
            "MONTE_CARLO_SEED": "99",
        }
        config = RunConfig.from_argv(["10", "0", "1"], environ=env)
        assert config.debug
        assert config.verbose
        assert config.seed == 99

    def test_falsy_toggle(self) -> None:
        config = RunConfig.from_argv(["10", "0", "1"], environ={"MONTE_CARLO_DEBUG": "0"})
        assert not config.debug

    def test_bad_seed(self) -> None:
        with pytest.raises(UsageError):
            RunConfig.from_argv(["10", "0", "1"], environ={"MONTE_CARLO_SEED": "abc"})
