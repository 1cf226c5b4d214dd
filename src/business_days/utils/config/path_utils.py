"""Path utilities module.

Resolves data file locations against the directory shipped inside the
package, or against ``BUSINESS_DAYS_DATA_DIR`` when that variable is set.
"""

import os
import re
from typing import List


class PathUtils:  # pylint: disable=too-few-public-methods
    """Utility class for building normalized data file paths."""

    _PACKAGE_DATA_DIR: str = os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
        "data",
    )

    @staticmethod
    def data_dir() -> str:
        """Return the directory data files are resolved against."""
        override: str = os.getenv("BUSINESS_DAYS_DATA_DIR", "").strip()
        if len(override) == 0:
            return PathUtils._PACKAGE_DATA_DIR
        base_path: str = os.sep.join(
            [p for p in re.split(r"[\\/]", override) if p.strip()]
        )
        if override.startswith(("\\", "/")):
            base_path = os.sep + base_path
        return base_path

    @staticmethod
    def build(*segments: str) -> str:
        """Build a normalized path under the data directory from mixed separators."""
        parts: List[str] = []
        for segment in segments:
            if segment:
                parts.extend(p for p in re.split(r"[\\/]", segment) if p)
        return os.path.join(PathUtils.data_dir(), *parts)
