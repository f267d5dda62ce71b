#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from typing import Callable, NamedTuple

# Local ----------------------------------------------------------------------------------------------------------------
from unitconv.cli import run


class CliResult(NamedTuple):
    code: int
    out: str
    err: str


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys) -> Callable[..., CliResult]:
    """Fixture to run the CLI with the given args and capture exit code, stdout and stderr."""

    def _run(*args: str) -> CliResult:
        code = run(list(args))
        captured = capsys.readouterr()
        return CliResult(code, captured.out, captured.err)

    return _run
