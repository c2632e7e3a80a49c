"""Level 1: Data Ingestion.

This module loads the first sheet of a workbook into records and
classifies raw cell values into a closed set of kinds.
"""

from .cells import CellKind, as_timestamp, cell_kind, is_blank
from .loader import Dataset, DatasetLoadError, Record, load_dataset, records_from_dataframe

__all__ = [
    "as_timestamp",
    "CellKind",
    "cell_kind",
    "Dataset",
    "DatasetLoadError",
    "is_blank",
    "load_dataset",
    "Record",
    "records_from_dataframe",
]
