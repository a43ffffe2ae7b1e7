"""vsctools: query the VSC account page REST API from the command line."""

__version__ = "0.1.0"
