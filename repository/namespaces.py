# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "wallpaper"

INDEX: Final[str] = f"{ROOT}:index"  # one JSON array of blob keys per partition
