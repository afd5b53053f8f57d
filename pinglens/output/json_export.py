"""
JSON export for PingLens
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import PingResponse
from .. import __version__


class JsonExporter:
    """
    Export ping results to JSON format.

    Summary fields keep the fixed 3-decimal text produced by the parser
    so consumers see exactly what the console shows.
    """

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform

    def export(self, response: PingResponse,
               output_path: Optional[Path] = None) -> dict:
        """
        Export a ping response to JSON.

        Args:
            response: Finalized ping response
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "PingLens",
                "platform": self.platform,
                "generated_at": datetime.now().isoformat()
            },
            **response.to_dict()
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def export_json(response: PingResponse, output_path: Optional[Path] = None,
                platform: Optional[str] = None) -> dict:
    """Convenience function for JSON export"""
    exporter = JsonExporter(platform)
    return exporter.export(response, output_path)
