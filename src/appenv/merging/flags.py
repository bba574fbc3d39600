"""Boolean flags derived from the active environment."""

from collections.abc import Iterable

from ..domain.config import PRODUCTION_FLAG, AppFlags
from ..domain.environments import (
    PRODUCTION_ENVIRONMENTS,
    SUPPORTED_ENVIRONMENTS,
    Environment,
)


def build_app_flags(
    env: Environment,
    supported: Iterable[Environment] = SUPPORTED_ENVIRONMENTS,
) -> AppFlags:
    """Build one ``IN_<ENV>`` flag per supported environment.

    ``IN_PRODUCTION`` is added on top and covers live and staging.

    Examples:
        >>> build_app_flags(Environment.STAGING)["IN_PRODUCTION"]
        True
    """
    flags = {candidate.flag_name: candidate == env for candidate in supported}
    flags[PRODUCTION_FLAG] = any(
        flags.get(candidate.flag_name, False) for candidate in PRODUCTION_ENVIRONMENTS
    )
    return AppFlags(flags)
