# SPDX-License-Identifier: Apache-2.0
"""Globe visualization output."""
