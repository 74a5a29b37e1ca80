"""Package-wide constants shared by the property containers."""

# reserved name of the group every store starts with
DEFAULT_GROUP_NAME = "__default__"

# number of channels in the color <-> vector representation
RGBA_VECTOR_SIZE = 4

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
