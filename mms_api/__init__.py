"""
MMS API client.

- core/: Configuration, logging, errors and operation results
- schemas/: Immutable resource models decoded from API JSON
- repositories/: The Agent, one method per API operation
- cli/: HTTP client and the Typer + Rich command-line interface
"""

__version__ = "0.2.0"
