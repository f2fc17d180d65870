"""
Config file discovery logic
"""

from pathlib import Path
from typing import Optional
from platformdirs import user_config_dir

LOCAL_CONFIG_NAME = 'walker_config.yaml'


def discover_config(explicit_path: str = None) -> Optional[str]:
    """
    Discover configuration file from various locations

    Priority order:
    1. Explicit path provided by user
    2. Current directory (./walker_config.yaml)
    3. OS-native config location (~/.config/maze_walker/config.yaml on Linux)

    Args:
        explicit_path: Optional explicit path to config file

    Returns:
        Absolute path to config file as string, or None to use built-in defaults

    Raises:
        FileNotFoundError: If an explicit path was given and does not exist
    """
    if explicit_path:
        path = Path(explicit_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {explicit_path}")
        return str(path)

    local_config = Path(LOCAL_CONFIG_NAME).resolve()
    if local_config.exists():
        return str(local_config)

    os_config_dir = Path(user_config_dir('maze_walker', appauthor=False))
    os_config = os_config_dir / 'config.yaml'
    if os_config.exists():
        return str(os_config)

    return None
