"""Container Apps recipe — renders a container workload into a platform manifest."""

__version__ = "0.1.0"
