"""
Exceptions raised while loading the movie and credit datasets.
"""


class DatasetError(Exception):
    """Base class for data-shape problems found while loading a dataset."""


class MalformedCreditEntry(DatasetError, ValueError):
    """A raw crew entry does not end with a parenthesized role, e.g. ``"Name (Director)"``."""

    def __init__(self, entry: str, credit_id: str | None = None):
        self.entry = entry
        self.credit_id = credit_id
        where = f" in credit {credit_id}" if credit_id is not None else ""
        super().__init__(f"Crew entry has no parenthesized role{where}: {entry!r}")
