"""Tokenizer for sentinel-delimited ``git log`` output.

Each commit is rendered as::

    <ITEM>subject<ITEM>hash<ITEM>ref<ITEM>author<ITEM>email<ITEM>date<ENTRY>

Git terminates every record with a newline, so the text before the first
item separator of each fragment is whitespace and is discarded.
"""

from __future__ import annotations

from typing import Generator, List

from githd.git.models import LogEntry, LogParseError

ENTRY_SEPARATOR = "471a2a19-885e-47f8-bff3-db43a3cdfaed"
ITEM_SEPARATOR = "e69fde18-a303-4529-963d-f5b63b7b1664"

# subject, abbreviated hash, ref decoration, author name, author email, relative date
_FIELDS = ("%s", "%h", "%d", "%aN", "%ae", "%cr")
FIELD_COUNT = len(_FIELDS)

LOG_FORMAT = "--format=" + "".join(ITEM_SEPARATOR + f for f in _FIELDS) + ENTRY_SEPARATOR


class LogParser:
    """Parse log text produced with :data:`LOG_FORMAT`.

    Usage::

        for entry in LogParser(text).parse():
            print(entry.hash, entry.subject)
    """

    def __init__(self, log_text: str) -> None:
        self._fragments = log_text.split(ENTRY_SEPARATOR)

    def parse(self) -> Generator[LogEntry, None, None]:
        """Yield one LogEntry per record, in input order."""
        for index, fragment in enumerate(self._fragments):
            if not fragment.strip():
                continue
            fields = fragment.split(ITEM_SEPARATOR)[1:]
            if len(fields) != FIELD_COUNT:
                raise LogParseError(
                    f"Log record {index} has {len(fields)} fields, "
                    f"expected {FIELD_COUNT}"
                )
            subject, hash_, ref, author, email, date = fields
            yield LogEntry(
                subject=subject,
                hash=hash_,
                ref=ref,
                author=author,
                email=email,
                date=date,
            )


def parse_log(log_text: str) -> List[LogEntry]:
    """Return every LogEntry in *log_text*."""
    return list(LogParser(log_text).parse())
