"""Internal modules for fetchwrap.

WARNING: These modules are implementation details of `fetchwrap.client`.
They are not intended for direct use in application code.

Modules:
    executor - Request/response normalization
    http - Shared HTTP client configuration
"""
