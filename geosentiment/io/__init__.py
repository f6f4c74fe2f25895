"""GeoSentiment I/O package.

Ingestion and file read/write operations only — no scoring logic in this layer.
"""

from geosentiment.io.csv_loader import load_csv_file, parse_csv_text
from geosentiment.io.demo_data import generate_demo_records
from geosentiment.io.persistence import load_json, load_records, save_json, save_records

__all__ = [
    "parse_csv_text",
    "load_csv_file",
    "generate_demo_records",
    "save_json",
    "load_json",
    "save_records",
    "load_records",
]
