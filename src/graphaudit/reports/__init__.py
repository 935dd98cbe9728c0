from .csv_report import NodeTableReporter
from .json_report import JSONReporter
from .terminal_report import print_distance_matrix, print_terminal_summary

__all__ = [
    "JSONReporter",
    "NodeTableReporter",
    "print_distance_matrix",
    "print_terminal_summary",
]
