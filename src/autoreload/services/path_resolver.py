"""Find the backing file of a data source from its description."""

from typing import Optional

from autoreload.host.provider import DataSourceHandle
from autoreload.utils.logging import get_logger


logger = get_logger(__name__)

PATH_KEY = "path"


def resolve_path(handle: Optional[DataSourceHandle]) -> Optional[str]:
    """
    Return the value of the first description entry whose name mentions a path.

    Entries are ``(name, value)`` pairs; ``DescriptionEntry`` and plain
    tuples both work. A handle without such an entry, or one whose
    description can't be queried or iterated, has no backing file as far as
    reloading is concerned: the result is None and the caller skips the tick.

    Args:
        handle: Data source to inspect

    Returns:
        File path string, or None if the source has no resolvable path
    """
    if handle is None:
        return None

    try:
        for name, value in handle.get_data_description():
            if PATH_KEY in str(name).lower() and value:
                return str(value)
    except Exception as e:
        logger.debug("path_description_unavailable", error=str(e))

    return None
