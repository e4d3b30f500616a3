"""
Serialcheck version constants.

This module defines version constants for the library and for the fixture
file format. The format version is stamped into every fixture header so
older fixtures stay loadable after the format evolves.
"""

# Library version (matches pyproject.toml)
SERIALCHECK_VERSION = "0.1.0"

# Format of the fixture envelope written by FixtureStore.save
# Increment when the header layout changes in a breaking way
FIXTURE_FORMAT = "fixture_v1"

# Formats this release can still read
SUPPORTED_FIXTURE_FORMATS = ("fixture_v1",)

# File extension used by the naming function
DEFAULT_FIXTURE_EXTENSION = "ser"
