"""Core functionality for SmartThings control.

This package contains:
- client: SmartThingsClient for authenticated API requests
- directory: Paginated device fetch and name resolution
- dispatch: Concurrent per-device commands and status
- controller: SmartThingsController used by the CLI commands
- config / auth: Settings and token lookup (1Password, config file)
- errors: Exception types
"""
