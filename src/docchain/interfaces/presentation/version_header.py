"""Header model for the version history bar."""

from dataclasses import dataclass
from datetime import datetime

from docchain.application.services.version_navigator import DocumentView
from docchain.domain.exceptions import ValidationError
from docchain.interfaces.presentation.version_labels import (
    format_relative_time,
    format_version_label,
    format_version_time,
)

RESTORE_SUCCEEDED_NOTICE = "Version restored successfully"
RESTORE_FAILED_NOTICE = "Failed to restore version"
INVALID_VERSION_NOTICE = "Invalid version selected"


@dataclass(frozen=True)
class VersionHeader:
    """Everything the history bar renders for the viewed version."""

    version_number: int
    date_label: str
    time_label: str
    relative_label: str
    is_latest: bool
    restore_disabled: bool


def build_version_header(
    view: DocumentView, now: datetime, restoring: bool = False
) -> VersionHeader | None:
    """Header for the viewed version; None when there is nothing to show."""
    version = view.current_version
    if version is None:
        return None
    return VersionHeader(
        version_number=version.version,
        date_label=format_version_label(version.created_at, now),
        time_label=format_version_time(version.created_at, now),
        relative_label=format_relative_time(version.created_at, now),
        is_latest=view.navigation.is_at_latest,
        restore_disabled=restoring,
    )


def restore_notice(error: Exception | None) -> str:
    """Notice to show after a restore attempt."""
    if error is None:
        return RESTORE_SUCCEEDED_NOTICE
    if isinstance(error, ValidationError):
        return INVALID_VERSION_NOTICE
    return RESTORE_FAILED_NOTICE
