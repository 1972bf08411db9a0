# SPDX-License-Identifier: Apache-2.0
"""Globe bundle renderers."""

from __future__ import annotations

from .base import InteractiveBundle, InteractiveRenderer
from .globe_gl import GlobeGLRenderer

__all__ = [
    "GlobeGLRenderer",
    "InteractiveBundle",
    "InteractiveRenderer",
]
