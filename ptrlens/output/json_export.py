"""
JSON export for PtrLens
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import AddressList, AddressRecord
from .. import __version__


class JsonExporter:
    """
    Export resolution results to JSON format.

    Output format is designed to be both human-readable
    and machine-parseable.
    """

    def __init__(self, resolver: str, jobs: int, backend: str = 'thread'):
        self.resolver = resolver
        self.jobs = jobs
        self.backend = backend

    def export(self, records: AddressList,
               output_path: Optional[Path] = None) -> dict:
        """
        Export resolved records to JSON.

        Args:
            records: Resolved address list
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "PtrLens",
                "resolver": self.resolver,
                "jobs": self.jobs,
                "backend": self.backend,
                "generated_at": datetime.now().isoformat()
            },
            "count": len(records),
            "records": [self._serialize_record(r) for r in records]
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _serialize_record(self, record: AddressRecord) -> dict:
        """Serialize a single record"""
        return {
            "ip": str(record.address),
            "version": record.address.version,
            "name": record.name
        }

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
