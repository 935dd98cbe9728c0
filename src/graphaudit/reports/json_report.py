import json

from graphaudit.models import GraphReport


class JSONReporter:
    """Generates JSON graph reports"""

    def generate(self, report: GraphReport, output_path: str):
        """Write the report to a JSON file"""
        data = report.to_dict()

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        return data
