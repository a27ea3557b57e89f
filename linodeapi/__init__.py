"""Client library for the Linode API v4: regions, types, tickets, tokens, StackScripts, VLANs, volumes, tags and polling."""

__version__ = "0.1.0"