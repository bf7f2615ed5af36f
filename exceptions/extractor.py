class ExtractionError(Exception):
    """
    Base exception for extraction engine errors
    """

    pass


class ConfigurationError(ExtractionError):
    """
    Raised when configuration is invalid
    """

    pass


class BatchProcessingError(ExtractionError):
    """
    Raised when a single item fails inside a batch run
    """

    def __init__(self, index: int, original_error: Exception):
        super().__init__(f"Item {index} failed: {original_error}")
        self.index = index
        self.original_error = original_error
