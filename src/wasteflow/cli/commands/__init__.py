"""
CLI Commands Package.

Each command is implemented in its own module.
"""
