"""GeoSentiment utilities package.

All utilities are stateless functions with no external calls or side effects.
"""

from geosentiment.utils.date_utils import day_key, normalize_timestamp, parse_timestamp
from geosentiment.utils.geo_utils import is_valid_coordinate, random_city
from geosentiment.utils.text import normalize_text, tokenize

__all__ = [
    "day_key",
    "normalize_timestamp",
    "parse_timestamp",
    "is_valid_coordinate",
    "random_city",
    "normalize_text",
    "tokenize",
]
