"""xkpass: XKCD-style passphrase generator."""

__version__ = "0.1.0"
