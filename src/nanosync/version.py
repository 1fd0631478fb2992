"""
Version management for Nanosync.
"""

# Base version - update this for releases
BASE_VERSION = "0.1.0"

# Export the version
__version__ = BASE_VERSION
