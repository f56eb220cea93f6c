"""Run a command and report its time and resource usage."""

__version__ = "1.0.0"
