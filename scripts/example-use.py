from pathlib import Path

from microstates.core import ReportConfig
from microstates.enumerator import tabulate_microstates
from microstates.report import write_report
from microstates.typing import format_ms
from microstates.utils import configure_logging
from microstates.visualize.table import plot_microstate_table

data_path = Path(__file__).resolve().parents[1] / "data"
report_folder = data_path / "reports"
report_folder.mkdir(parents=True, exist_ok=True)

configure_logging()

run = {
    "report": True,
    "table": True,
    "plot": False,
}

if run["report"]:
    config = ReportConfig().set_output_path(report_folder / "MicroestadosElectronicos_D5.txt")
    write_report(config)

if run["table"]:
    for (ml, two_ms), count in tabulate_microstates(3).items():
        print(f"ML={ml:>2} MS={format_ms(two_ms):>4} : {count}")

if run["plot"]:
    fig = plot_microstate_table(3)
    fig.write_html(report_folder / "d3_microstates.html")
