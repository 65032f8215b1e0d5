"""Internal modules for the Heroku SDK.

These modules are re-exported from ``heroku_sdk`` where they are public; import
them from there in application code.

Modules:
    dispatch - Request construction, dispatch and list ranges
    http - Shared HTTP client configuration
"""
