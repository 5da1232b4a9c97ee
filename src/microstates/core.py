import codecs
from dataclasses import dataclass, replace
from pathlib import Path

from microstates.exceptions import ValidationError
from microstates.typing import MAX_ELECTRONS
from microstates.utils import logger

DEFAULT_REPORT_NAME = "MicroestadosElectronicos_D5.txt"
ALLOWED_ENCODINGS = {"ascii", "utf-8"}


@dataclass(frozen=True)
class ReportConfig:
    """
    Settings for a microstate report run.

    Attributes:
        output_path (Path | str): File the report is written to. Any existing file is overwritten.
            Defaults to "MicroestadosElectronicos_D5.txt" in the working directory.
        min_electrons (int): First electron count to enumerate. Defaults to 1.
        max_electrons (int): Last electron count to enumerate (inclusive). Defaults to 10.
        encoding (str): Report file encoding, "ascii" or "utf-8" (aliases accepted). Defaults to "ascii".
    """

    output_path: Path | str = DEFAULT_REPORT_NAME
    min_electrons: int = 1
    max_electrons: int = MAX_ELECTRONS
    encoding: str = "ascii"

    def __post_init__(self) -> None:
        """
        Normalizes the output path and encoding name and validates the electron range.

        Raises:
            ValidationError: If either bound is not an integer.
            ValidationError: If the range is empty or falls outside 1..10.
            ValidationError: If the encoding is unknown or not ASCII/UTF-8.

        Warns:
            UserWarning: If the range does not cover the full d shell.
        """
        object.__setattr__(self, "output_path", Path(self.output_path))

        for bound in (self.min_electrons, self.max_electrons):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise ValidationError("Electron range bounds must be integers.")
        if not 1 <= self.min_electrons <= self.max_electrons <= MAX_ELECTRONS:
            raise ValidationError(
                f"Electron range must satisfy 1 <= min <= max <= {MAX_ELECTRONS}, "
                f"got min={self.min_electrons}, max={self.max_electrons}."
            )

        try:
            encoding = codecs.lookup(self.encoding).name
        except (LookupError, TypeError) as e:
            raise ValidationError(f"Unknown report encoding: {self.encoding!r}.") from e
        if encoding not in ALLOWED_ENCODINGS:
            raise ValidationError(f"Report encoding must be one of {sorted(ALLOWED_ENCODINGS)}, got {self.encoding!r}.")
        object.__setattr__(self, "encoding", encoding)

        if (self.min_electrons, self.max_electrons) != (1, MAX_ELECTRONS):
            logger.warning(
                f"Report restricted to d{self.min_electrons}..d{self.max_electrons}; "
                "the full report covers 1 to 10 electrons."
            )

    @property
    def electron_counts(self) -> range:
        """Electron counts to enumerate, in report order."""
        return range(self.min_electrons, self.max_electrons + 1)

    def set_output_path(self, output_path: Path | str) -> "ReportConfig":
        """
        Set the report destination.

        Args:
            output_path (Path | str): Path of the report file.

        Returns:
            ReportConfig: A new ReportConfig instance with the output path updated.
        """
        return replace(self, output_path=Path(output_path))

    def set_electron_range(self, min_electrons: int, max_electrons: int) -> "ReportConfig":
        """
        Restrict the report to a sub-range of electron counts.

        Args:
            min_electrons (int): First electron count (>= 1).
            max_electrons (int): Last electron count (<= 10).

        Returns:
            ReportConfig: A new ReportConfig instance with the range updated.

        Raises:
            ValidationError: If the range is invalid (raised by __post_init__).
        """
        logger.debug(f"Setting electron range to {min_electrons}..{max_electrons}")
        return replace(self, min_electrons=min_electrons, max_electrons=max_electrons)
