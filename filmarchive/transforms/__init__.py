"""Pure transforms between relational film records, forms and CSV exports.

None of these functions perform I/O or mutate their inputs; missing
sub-records are defaulted rather than reported.
"""

from filmarchive.transforms.csv_writer import CsvExport, build_csv_export, serialize
from filmarchive.transforms.export import format_block, to_export_record, to_export_records
from filmarchive.transforms.extract import RoleEntry, find_by_role, first_or_default
from filmarchive.transforms.form import (
    new_form,
    to_form,
    to_persistence_payload,
    validate_form,
)
from filmarchive.transforms.grouping import group_by, team_by_department
from filmarchive.transforms.keys import column_key, truncate_date

__all__ = [
    "CsvExport",
    "RoleEntry",
    "build_csv_export",
    "column_key",
    "find_by_role",
    "first_or_default",
    "format_block",
    "group_by",
    "new_form",
    "serialize",
    "team_by_department",
    "to_export_record",
    "to_export_records",
    "to_form",
    "to_persistence_payload",
    "truncate_date",
    "validate_form",
]
