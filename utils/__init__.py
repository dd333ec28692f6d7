from utils.response_handler import build_api_response
from utils.datetime import get_current_time, localize_datetime
from utils.string import clean_text, normalize_locality

__all__ = [
    "build_api_response",
    "get_current_time",
    "localize_datetime",
    "clean_text",
    "normalize_locality",
]
