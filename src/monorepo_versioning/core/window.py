"""Time window of the commits considered for a new version."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

START_OF_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True)
class ChangeWindow:
    """Commit time range ``[since, until)``."""

    since: datetime
    until: datetime


def resolve_change_window(
    previous_change_time: datetime | None,
    current_change_time: datetime,
) -> ChangeWindow:
    """Compute the commit window for a versioning run.

    Args:
        previous_change_time: Commit time of the latest component release's
            target commit, or None if the component has never been released
        current_change_time: Commit time of the revision being released

    Returns:
        The window to list commits in
    """
    # Commit listing treats "until" as exclusive; include the current commit
    until = current_change_time + timedelta(milliseconds=1)

    if previous_change_time is None:
        since = START_OF_EPOCH
    else:
        # Skip the commit the previous release was created from
        since = previous_change_time + timedelta(seconds=1)

    return ChangeWindow(since=since, until=until)
