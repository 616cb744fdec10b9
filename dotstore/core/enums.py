from dotstore.utils import StrEnum


class Scope(StrEnum):
    """
    Directory scope an entry is stored in.
    """

    LOCAL = "local"
    """`.<base>` directory in the current working directory."""
    GLOBAL = "global"
    """`.<base>` directory in the home directory."""
