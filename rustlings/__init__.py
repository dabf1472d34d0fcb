"""Exercise runner: verify, watch, run, hint and list course exercises."""

__version__ = "4.6.0"