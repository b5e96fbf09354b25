# Common utilities
from .config_loader import ExtractionSettings, DEFAULT_SETTINGS, load_config, load_extraction_settings
from .log_config import setup_logging
from .text_utils import clean_string
from .url_utils import resolve_url
