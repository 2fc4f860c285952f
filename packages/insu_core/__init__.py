"""
Core pieces of the Insu PDF chat service.

This package contains:
- Settings shared by the API, the CLI and the query service
- Request/response and inference envelope models
- The prompt assembler that turns a PDF corpus into a single prompt
- The error taxonomy used across the service
"""
