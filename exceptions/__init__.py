from .extractor import BatchProcessingError, ConfigurationError, ExtractionError
from .parsers import CategoryNotFoundError, InsufficientDataError, ParsingError

__all__ = [
    "ExtractionError",
    "ConfigurationError",
    "BatchProcessingError",
    "ParsingError",
    "CategoryNotFoundError",
    "InsufficientDataError",
]
