"""The main window model and the command that starts the application."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from lancer.canvas import Canvas
from lancer.color import Color
from lancer.color_picker import HSVColorPicker
from lancer.files import load_file_as_text

_LOG = logging.getLogger(__name__)

UNKNOWN_VERSION = "Unknown Version"
MIN_WINDOW_SIZE = (800, 800)
SIDEBAR_SIZES = (200, 800)


def _default_version_paths() -> list[Path]:
    return [
        Path(sys.argv[0]).resolve().parent / "version.txt",
        Path("assets") / "version.txt",
    ]


def load_version(search_paths: Iterable[str | os.PathLike[str]]) -> str:
    """Return the first non-empty version text found among ``search_paths``."""
    for path in search_paths:
        try:
            version = load_file_as_text(path).strip()
        except RuntimeError:
            continue
        if version:
            _LOG.debug("Loaded version from %s: %s", path, version)
            return version
    _LOG.debug("Could not load version from any location")
    return UNKNOWN_VERSION


class MainWindow:
    """Ties the colour picker to the canvas and names the window."""

    def __init__(self, version_paths: Iterable[str | os.PathLike[str]] | None = None) -> None:
        paths = _default_version_paths() if version_paths is None else version_paths
        self.version = load_version(paths)
        self.title = f"Lancer: v{self.version}"
        self.canvas = Canvas()
        self.color_picker = HSVColorPicker()
        self.color_display = Color(0.0, 0.0, 0.0).name()
        self.color_picker.listeners.append(self.on_color_changed)

    def on_color_changed(self, color: Color) -> None:
        """Apply a newly picked colour to the canvas and the colour display."""
        self.canvas.set_color(color)
        self.color_display = color.name()
        print(f"Color changed to: {color.name()}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the application and report its window title."""
    parser = argparse.ArgumentParser(prog="lancer", description="A simple stroke painter.")
    parser.add_argument("--version", action="store_true", help="print the version and exit")
    args = parser.parse_args(argv)
    window = MainWindow()
    if args.version:
        print(window.version)
    else:
        print(window.title)
    return 0


if __name__ == "__main__":
    sys.exit(main())