"""Fetch RIR whois dumps, parse their RPSL objects and write them as JSON."""

__version__ = "0.1.0"