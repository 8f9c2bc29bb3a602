"""
CLI Client Module.

Command-line client built with Typer for communicating with the MMS API.

Architecture:
- client.py is the HTTP transport (httpx, digest auth)
- The Agent in mms_api.repositories does all decoding and reference resolution
- Commands are a thin presentation layer over Agent operations
- Agent failures come back as Err results and map to exit codes

Usage:
    mms-api --help
    mms-api hosts
    mms-api --json snapshots
"""
