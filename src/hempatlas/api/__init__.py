# SPDX-License-Identifier: Apache-2.0
"""HTTP API for the atlas globe."""
