import logging
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..constants import FIXED_SLOT_WIDTH
from ..exceptions import NoSuchFieldError
from ..types import FieldType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldEntry:
    """One slot of a schema: a type and an optional name."""
    field_type: FieldType
    field_name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.field_type}({self.field_name})"


class TupleDesc:
    """
    Schema descriptor for a tuple (row).

    A TupleDesc defines:
    1. The types of fields in the tuple (int, string, etc.)
    2. Optional field names for each position
    3. Methods to calculate tuple size and lookup fields

    This is the database's "schema" - it tells us what a row looks like.
    Think of it as the column definitions in a CREATE TABLE statement.

    A TupleDesc never changes after construction. merge() builds a new
    one, so a single instance can be shared by every page, tuple and
    operator that reads it. Descriptors are deliberately unhashable:
    equality only looks at field widths.
    """

    __slots__ = ("_entries",)

    def __init__(self, field_types: Iterable[FieldType],
                 field_names: Optional[Iterable[Optional[str]]] = None):
        field_types = list(field_types)
        if not field_types:
            raise ValueError("TupleDesc must have at least one field")

        if isinstance(field_names, (str, bytes)):
            raise ValueError(
                f"Field names must be a sequence of names, not a single {type(field_names).__name__}")

        if field_names is None:
            field_names = [None] * len(field_types)
        else:
            field_names = list(field_names)

        if len(field_names) != len(field_types):
            raise ValueError(f"Number of field names ({len(field_names)}) "
                             f"must match number of field types ({len(field_types)})")

        self._entries: tuple[FieldEntry, ...] = tuple(
            FieldEntry(field_type, field_name)
            for field_type, field_name in zip(field_types, field_names))

    @classmethod
    def anonymous(cls, field_types: Iterable[FieldType]) -> 'TupleDesc':
        """Create a descriptor whose fields all have no name."""
        return cls(field_types)

    @property
    def field_types(self) -> tuple[FieldType, ...]:
        return tuple(entry.field_type for entry in self._entries)

    @property
    def field_names(self) -> tuple[Optional[str], ...]:
        return tuple(entry.field_name for entry in self._entries)

    def num_fields(self) -> int:
        """Return the number of fields in this tuple descriptor."""
        return len(self._entries)

    def _entry(self, field_index: int) -> FieldEntry:
        if isinstance(field_index, bool):
            raise TypeError("Field index must be an int, got bool")
        field_index = operator.index(field_index)
        if not (0 <= field_index < len(self._entries)):
            logger.debug("Rejected field index %d for %s", field_index, self)
            raise NoSuchFieldError(
                f"Field index {field_index} out of range [0, {len(self._entries)})")
        return self._entries[field_index]

    def get_field_type(self, field_index: int) -> FieldType:
        """Get the type of the field at the given index."""
        return self._entry(field_index).field_type

    def get_field_name(self, field_index: int) -> Optional[str]:
        """Get the name of the field at the given index, or None if it has none."""
        return self._entry(field_index).field_name

    def name_to_index(self, field_name: Optional[str]) -> int:
        """
        Find the index of a field by name.

        Matching is exact and case-sensitive. If several fields share the
        name, the first one wins. Anonymous fields never match, not even
        a lookup for None.
        """
        if field_name is not None:
            for i, entry in enumerate(self._entries):
                if entry.field_name == field_name:
                    return i

        logger.debug("Field %r not found in %s", field_name, self)
        raise NoSuchFieldError(
            f"Field '{field_name}' not found in tuple descriptor")

    def get_size(self) -> int:
        """
        Calculate the total size in bytes for a tuple with this descriptor.

        Every slot counts as FIXED_SLOT_WIDTH bytes whatever its type.
        Page layout and record offsets are computed from this value.
        """
        return self.num_fields() * FIXED_SLOT_WIDTH

    def declared_size(self) -> int:
        """Sum of the declared widths of all field types."""
        return sum(entry.field_type.get_length() for entry in self._entries)

    def equals(self, other: object) -> bool:
        """
        Check if two tuple descriptors are equivalent.

        Two TupleDescs are equal if they have the same number of fields and
        the field types at each position have the same width. Field names
        are NOT considered, and neither is the kind of the type: an INT and
        a FLOAT column are interchangeable here.
        """
        if not isinstance(other, TupleDesc):
            return False
        if self.num_fields() != other.num_fields():
            return False
        return all(
            mine.field_type.get_length() == theirs.field_type.get_length()
            for mine, theirs in zip(self._entries, other._entries))

    @staticmethod
    def merge(td1: 'TupleDesc', td2: 'TupleDesc') -> 'TupleDesc':
        """
        Merge two tuple descriptors into one.

        The result has fields from td1 followed by fields from td2.
        Used for join operations where we concatenate tuples. Duplicate
        names are kept as they are.
        """
        entries = td1._entries + td2._entries
        return TupleDesc([entry.field_type for entry in entries],
                         [entry.field_name for entry in entries])

    def __iter__(self) -> Iterator[FieldEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        """Python equality operator - delegates to equals method."""
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"TupleDesc({', '.join(str(entry) for entry in self._entries)})"

    def __repr__(self) -> str:
        return self.__str__()
