"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.parse_char_list  # noqa: F821  # unused method (simpgen/core/config.py:40)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (simpgen/core/config.py:54)
