# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate counters for a sweep."""

from __future__ import annotations

from dataclasses import dataclass

from .probe import ProbeOutcome


@dataclass(frozen=True)
class BatchSummary:
    total: int = 0
    succeeded: int = 0
    failed: int = 0

    def record(self, outcome: ProbeOutcome) -> BatchSummary:
        """Return a new summary with ``outcome`` counted."""
        if outcome.succeeded:
            return BatchSummary(self.total + 1, self.succeeded + 1, self.failed)
        return BatchSummary(self.total + 1, self.succeeded, self.failed + 1)

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "success": self.succeeded, "failure": self.failed}
