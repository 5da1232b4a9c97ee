"""Text report of d^n microstates.

For each electron count the report holds::

    Numero de electrones: <n>
    Numero de combinaciones: <C(10, n)>
    [+1][0][0][0][0] ML: 2 MS: 1/2
    ...
    <blank line>
"""

from collections.abc import Iterator
from pathlib import Path

from microstates.core import ReportConfig
from microstates.enumerator import COMBINATION_COUNTS, enumerate_microstates
from microstates.exceptions import InternalCodeError, ReportWriteError
from microstates.patterns import validate_electron_count
from microstates.utils import logger


def render_group(n_electrons: int) -> Iterator[str]:
    """Yields the report lines for one electron count, ending with a blank line.

    Args:
        n_electrons: Number of d electrons, 1 to 10.

    Raises:
        ValidationError: If ``n_electrons`` is outside 1..10.
        InternalCodeError: If the number of microstates differs from C(10, n).
    """
    validate_electron_count(n_electrons)
    expected = COMBINATION_COUNTS[n_electrons]
    yield f"Numero de electrones: {n_electrons}"
    yield f"Numero de combinaciones: {expected}"

    n_states = 0
    for state in enumerate_microstates(n_electrons):
        n_states += 1
        yield state.render()

    if n_states != expected:
        raise InternalCodeError(f"Enumerated {n_states} microstates for n={n_electrons}, expected {expected}.")
    logger.info(f"d{n_electrons}: {n_states} microstates")
    yield ""


def render_report(config: ReportConfig | None = None) -> str:
    """Renders the full report as a single string.

    Args:
        config: Report settings; defaults to 1..10 electrons.

    Returns:
        The report text, every line newline-terminated.
    """
    config = config or ReportConfig()
    lines: list[str] = []
    for n_electrons in config.electron_counts:
        lines.extend(render_group(n_electrons))
    return "\n".join(lines) + "\n"


def write_report(config: ReportConfig | None = None) -> Path:
    """Renders the report and writes it to ``config.output_path``, overwriting any previous file.

    The text is rendered completely before the file is opened, so an enumeration
    failure never leaves a partial report behind.

    Args:
        config: Report settings; defaults to 1..10 electrons written to
            ``MicroestadosElectronicos_D5.txt``.

    Returns:
        Path of the written report.

    Raises:
        ReportWriteError: If the file cannot be created or written.
    """
    config = config or ReportConfig()
    text = render_report(config)
    output_path = Path(config.output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding=config.encoding, newline="\n") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Could not write microstate report to {output_path}: {e}")
        raise ReportWriteError(f"Could not write microstate report to '{output_path}'.") from e

    logger.info(f"Wrote microstate report to {output_path}")
    return output_path
