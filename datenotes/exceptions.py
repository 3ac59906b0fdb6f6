"""Exception hierarchy for date note operations."""


class DateNoteError(Exception):
    """Base exception for date note operations."""

    pass


class ConfigurationError(DateNoteError):
    """Invalid calendar configuration (calendar type or start of the week)."""

    pass


class UnknownPatternError(DateNoteError):
    """Title pattern contains a token that cannot be expanded."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown pattern {{{token}}}")


class StructuralIntegrityError(DateNoteError):
    """Expected parent/label relationship is missing from the note tree."""

    pass


class CloneFailureError(DateNoteError):
    """Attaching a note to an additional parent was refused by the store."""

    pass


class InvalidDateError(DateNoteError):
    """Date string is not a canonical YYYY-MM-DD date."""

    pass


class NoteNotFoundError(DateNoteError):
    """Note id is not present in the store."""

    pass
