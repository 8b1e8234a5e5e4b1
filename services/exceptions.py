"""Error taxonomy for the candidate intake workflow."""

from typing import Dict, List


class CandidateIntakeError(Exception):
    """Base class for every intake failure."""


class ValidationFailed(CandidateIntakeError):
    """One or more field-level violations; carries the full set."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(f"Validation failed for {len(errors)} field(s): {', '.join(sorted(errors))}")


class ConflictExists(CandidateIntakeError):
    """A candidate with the same email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A candidate with email {email!r} already exists")


class PersistenceFailed(CandidateIntakeError):
    """The store rejected the write or was unreachable."""


class FileRejected(CandidateIntakeError):
    """An uploaded file has a disallowed type/extension or is too large."""
