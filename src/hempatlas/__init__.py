# SPDX-License-Identifier: Apache-2.0
"""Location resolution and layered marker composition for the Hemp Atlas globe."""

from __future__ import annotations

__version__ = "0.1.0"
