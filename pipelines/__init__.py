# pipelines/__init__.py
"""
Pipeline module initialization.
Exports the match pipeline, the export boundary and the collection runner.
"""

from .orchestrator import MatchPipeline
from .record_export import export_records, pack_record, records_to_dataframe
from .run_match_collection import CollectionSummary, MatchCollectionRunner

__all__ = [
    "MatchPipeline",
    "pack_record",
    "records_to_dataframe",
    "export_records",
    "MatchCollectionRunner",
    "CollectionSummary",
]
