"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic, asyncio) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_set  # noqa: F821  # unused method (lexifetch/core/config.py)
_.strip_trailing_slash  # noqa: F821  # unused method (lexifetch/core/config.py)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (lexifetch/core/config.py)

# Pydantic model_config class variables - read by framework at class definition time
model_config  # noqa: F821  # unused variable (lexifetch/core/types.py)

# Async context manager protocol - used by AsyncExitStack in the pipeline
__aenter__  # noqa: F821  # unused method (lexifetch/lookup/client.py)
__aexit__  # noqa: F821  # unused method (lexifetch/lookup/client.py)
