"""Models, log formatting, listings and machine argument parsing for a hosting platform's command line."""

__version__ = "0.1.0"