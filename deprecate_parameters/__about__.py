from importlib.metadata import PackageNotFoundError
from importlib.metadata import metadata as importlib_metadata

try:
    metadata = importlib_metadata("deprecate-parameters")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    metadata = {"Name": "deprecate-parameters", "Version": "0.0.0+unknown"}

__title__ = metadata["Name"]
__summary__ = metadata.get("Summary")
__version__ = metadata["Version"]
__author__ = metadata.get("Author", metadata.get("Author-email"))
__license__ = metadata.get(
    "License", metadata.get("License-Expression", "BSD-3-Clause")
)
__url__ = metadata.get("Project-URL")

__all__ = [
    "__title__",
    "__summary__",
    "__version__",
    "__author__",
    "__license__",
    "__url__",
]
