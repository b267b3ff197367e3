"""Presentation helpers for version history views."""

from docchain.interfaces.presentation.version_header import (
    RESTORE_FAILED_NOTICE,
    RESTORE_SUCCEEDED_NOTICE,
    VersionHeader,
    build_version_header,
    restore_notice,
)
from docchain.interfaces.presentation.version_labels import (
    format_relative_time,
    format_version_label,
    format_version_time,
)

__all__ = [
    "RESTORE_FAILED_NOTICE",
    "RESTORE_SUCCEEDED_NOTICE",
    "VersionHeader",
    "build_version_header",
    "format_relative_time",
    "format_version_label",
    "format_version_time",
    "restore_notice",
]
