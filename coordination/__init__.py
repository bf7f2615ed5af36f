from .batch_runner import BatchProgress, BatchRunner

__all__ = ["BatchProgress", "BatchRunner"]
