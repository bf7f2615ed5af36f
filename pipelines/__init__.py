"""
Extraction pipelines.
Exports the top-level orchestrator and its configuration.
"""

from .match_data_orchestrator import MatchDataOrchestrator
from .orchestrator_config import OrchestratorConfig

__all__ = [
    "MatchDataOrchestrator",
    "OrchestratorConfig",
]
