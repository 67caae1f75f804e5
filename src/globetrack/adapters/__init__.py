# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for profile configuration.

External dependencies (json, file I/O) are confined to this layer.
"""
from globetrack.adapters.json_profiles import JsonProfileReader, parse_profile

__all__ = ["JsonProfileReader", "parse_profile"]
