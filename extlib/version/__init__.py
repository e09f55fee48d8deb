# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Built-in version detectors."""

from .line_pattern import LinePatternDetector
from .static import StaticDetector

PLUGIN_KIND = 'version_detector'
PLUGINS = [StaticDetector, LinePatternDetector]

__all__ = ["StaticDetector", "LinePatternDetector"]
