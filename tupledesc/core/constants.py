"""Layout constants shared by schema descriptors and field types."""

# Every slot counts as this many bytes when sizing a tuple.
FIXED_SLOT_WIDTH = 4

# Strings are stored as a 4-byte length followed by the padded content.
STRING_LENGTH_PREFIX = 4
DEFAULT_STRING_LENGTH = 128
