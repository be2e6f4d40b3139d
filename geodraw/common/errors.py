"""Error policy shared by the editor modules.

Two outcomes exist for a problem:

- fatal: misconfiguration the caller must fix; raised with a remediation hint
- soft: an optional collaborator is missing; logged, and the request is ignored

Bad geometry is neither; the validator returns it as data.
"""

from loguru import logger


class ConfigError(ValueError):
    """Editor configuration is inconsistent or malformed."""


def raise_fatal_with_remedy(msg: str, remedy: str, exc_type: type[Exception] = RuntimeError) -> None:
    """Raise ``exc_type`` whose message ends with a remediation line.

    Args:
        msg: What went wrong
        remedy: How to fix it
        exc_type: Exception class to raise, e.g. ConfigError

    Raises:
        exc_type: Always.
    """
    raise exc_type(f"{msg}\n\nRemediation: {remedy}")


def warn_soft_degrade(component: str, issue: str, fallback: str) -> None:
    """Log that an optional component is unusable and what happens instead."""
    logger.warning(
        "Optional component '{}' issue: {}. Fallback: {}",
        component,
        issue,
        fallback,
    )
