import os
from pathlib import Path
from dataclasses import dataclass

APP_DIR_NAME = "Stopwatch"

# Lil helper function to create missing directories if missing, and optionally error out when a path
# doesn't exist.
def ensure_directory(path: Path,must_exist=False):
    if must_exist:
        if not path.exists():
            raise FileNotFoundError(f"Required directory is missing: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    else:
        path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the per-user base folder. Windows gets APPDATA like any other desktop app, everything else falls back to the
# XDG config home.
def user_data_root() -> Path:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / APP_DIR_NAME
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME.lower()
    return Path.home() / ".config" / APP_DIR_NAME.lower()

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    assets: Path
    data: Path

    logs: Path
    current: Path

    @staticmethod
    def build():
        # Source checkout (or site-packages) root, one level above the sw package
        root = Path(__file__).resolve().parents[2]

        # Optional font files named by the `font_file` setting live here. Not enforced, the UI falls back to a default font.
        assets = Path(__file__).resolve().parents[1] / "assets"

        # Folder for all user-specific stuff
        data = ensure_directory(user_data_root())

        logs = ensure_directory(data / "logs")
        current = ensure_directory(data / "current")

        return ProjectPaths(
            root = root,
            assets = assets,
            data = data,
            logs = logs,
            current = current,
        )
PATHS = ProjectPaths.build()
