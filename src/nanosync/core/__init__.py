"""
Command line tooling for Nanosync.
"""
