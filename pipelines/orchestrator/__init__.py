# pipelines/orchestrator/__init__.py
"""
Orchestrator module initialization.
Exports the match pipeline and its document sources.
"""

from .base_orchestrator import BaseOrchestrator
from .document_source import (
    DocumentSource,
    RequestsDocumentSource,
    SeleniumDocumentSource,
    create_document_source,
)
from .orchestrator_config import OrchestratorConfig
from .orchestrator_match import MatchPipeline

__all__ = [
    "BaseOrchestrator",
    "DocumentSource",
    "SeleniumDocumentSource",
    "RequestsDocumentSource",
    "create_document_source",
    "OrchestratorConfig",
    "MatchPipeline",
]
