"""Data model pairing an emitted page with its compound."""

from dataclasses import dataclass
from pathlib import PurePath

from doxymark.compound_record import CompoundRecord


@dataclass(frozen=True)
class TocEntry:
    """A written Markdown page and the compound it documents."""

    file_name: str
    record: CompoundRecord

    @property
    def label(self) -> str:
        """Link label: the file name without its extension."""
        return PurePath(self.file_name).stem
