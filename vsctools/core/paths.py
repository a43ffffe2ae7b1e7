import os
from pathlib import Path

APP_NAME = "vsctools"


def get_default_config_dir() -> Path:
    """Return the config directory: $VSCTOOLS_CONFIG_DIR, else the XDG config dir."""
    env_path = os.getenv("VSCTOOLS_CONFIG_DIR")
    if env_path:
        return Path(env_path).expanduser()

    return Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
