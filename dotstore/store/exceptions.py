class HomeResolutionError(Exception):
    """
    The home directory of the current user could not be determined.
    """
