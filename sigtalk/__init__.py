"""Send text between processes as bits carried by SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"
__all__ = ["client", "printf", "protocol", "server", "text"]