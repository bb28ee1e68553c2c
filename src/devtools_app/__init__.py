"""Backend operations for the developer tools desktop application.

This package renders directory trees as ASCII-art text, validates the paths
handed over by the frontend, and exposes the small command table (greeting,
tree rendering, folder picker) the frontend invokes.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("devtools-app")
except PackageNotFoundError:
    __version__ = "unknown"
