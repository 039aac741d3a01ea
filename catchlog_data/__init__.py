from .dataset_loader import catch_from_row, catches_frame, load_dataset, load_records, outing_from_row
from .export import build_export_csv, build_export_frame, export_report_csv, report_frames
from .validator import validate_dataset

__all__ = [
    "load_dataset",
    "load_records",
    "catch_from_row",
    "outing_from_row",
    "catches_frame",
    "report_frames",
    "build_export_frame",
    "build_export_csv",
    "export_report_csv",
    "validate_dataset",
]
