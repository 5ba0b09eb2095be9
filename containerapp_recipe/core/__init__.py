"""Core domain: models, pipeline services, use cases."""
