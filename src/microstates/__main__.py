from microstates.core import ReportConfig
from microstates.report import write_report
from microstates.utils import configure_logging


def main() -> None:
    """Writes the d1..d10 microstate report to the working directory."""
    configure_logging()
    write_report(ReportConfig())


if __name__ == "__main__":
    main()
