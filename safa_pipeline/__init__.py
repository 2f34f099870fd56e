"""SAFA finding pipeline.

Normalizes maintenance-finding spreadsheet rows and classifies each finding by
problem type and component. The core entry point is ``process_excel_data``.
"""

from .errors import EmptyDatasetError, MissingColumnError, NoRecordsError, PipelineError
from .models.record import SAFARecord
from .services.pipeline import process_excel_data

__version__ = "0.1.0"

__all__ = [
    "EmptyDatasetError",
    "MissingColumnError",
    "NoRecordsError",
    "PipelineError",
    "SAFARecord",
    "process_excel_data",
]
