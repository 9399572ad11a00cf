"""Staff Portal package.

This package is organized by feature modules (api, cache, session, records, ...)
with a thin Flask controller layer over services that talk to the remote REST API.
"""
