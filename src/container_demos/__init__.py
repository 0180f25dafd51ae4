"""
container_demos — command-line demonstrations of the fpcontainers library.

One demo per container: Box, Option, Validation and Reader (plain or
transactional), each printing `<description> = <container>` lines.
"""

__version__ = "0.1.0"
