import environ
from environ.compat import ImproperlyConfigured
import logging

log = logging.getLogger(__name__)

env = environ.Env()


def env_positive_int(name: str, default: int) -> int:
    """
    Read an integer setting from the environment (or .env) and refuse
    zero or negative values, which would reject every operation.
    """
    try:
        value = env.int(name, default=default)
    except ValueError as e:
        raise ImproperlyConfigured(f"Env value for {name} is not an integer") from e
    if value <= 0:
        raise ImproperlyConfigured(f"Env value for {name} must be positive, got {value}")
    if value != default:
        log.info("protocol parameter %s overridden: %s", name, value)
    return value
