"""XDG-compliant path management for treeplate.

Named layouts live in the user's configuration directory following the
XDG Base Directory Specification:

- Config: ~/.config/treeplate/
- Layouts: ~/.config/treeplate/layouts/<name>.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "treeplate"

LAYOUT_SUFFIX = ".toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/treeplate/ (or XDG_CONFIG_HOME/treeplate/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_layouts_dir() -> Path:
    """Get the directory holding named layouts.

    Returns:
        Path to ~/.config/treeplate/layouts/.
    """
    return get_config_dir() / "layouts"


def ensure_layouts_dir() -> Path:
    """Create the layouts directory if it doesn't exist.

    Returns:
        Path to the layouts directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_layouts_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create layouts directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create layouts directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def resolve_layout_path(name_or_path: str | Path) -> Path:
    """Resolve a layout argument to a file path.

    An argument that names an existing file, contains a path separator, or
    ends in ".toml" is used as a path. Anything else is a bare layout name
    looked up in the layouts directory.

    Args:
        name_or_path: Layout file path or bare layout name.

    Returns:
        Path to the layout file (which may not exist).
    """
    candidate = Path(name_or_path)
    text = str(name_or_path)
    if candidate.exists() or "/" in text or os.sep in text or text.endswith(LAYOUT_SUFFIX):
        return candidate
    return get_layouts_dir() / f"{text}{LAYOUT_SUFFIX}"
