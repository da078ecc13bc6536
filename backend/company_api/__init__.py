"""Company directory backend.

This package exposes the service, repository, schema and model modules
used by the FastAPI application. Companies own employees; the response
schemas decide how much of that two-way link is serialised.
"""
