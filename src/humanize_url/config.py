"""Configuration constants and helpers for the humanize-url CLI.

All configuration is optional and comes from command-line options, each of
which can also be supplied through the environment variable named here.
"""

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "humanize-url"  # pragma: no mutate
ENV_PREFIX = "HUMANIZE_URL"  # pragma: no mutate

LOG_PATH_ENVVAR = f"{ENV_PREFIX}_LOG_PATH"
FLIGHT_RECORDER_CAPACITY_ENVVAR = f"{ENV_PREFIX}_FLIGHT_RECORDER_CAPACITY"
FORCE_FLUSH_ENVVAR = f"{ENV_PREFIX}_FORCE_FLUSH_FLIGHT_RECORDER"
LOGGER_LEVELS_ENVVAR = f"{ENV_PREFIX}_LOGGER_LEVELS"
LINKS_ENVVAR = f"{ENV_PREFIX}_LINKS"

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000


def default_log_path() -> Path:
    """Return the default flight-recorder file, creating its directory if needed.

    Returns:
        Path: ``latest.log`` inside the platform's per-user log directory.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"
