"""Accounts, address conversion, configuration, a remote signing-service client, ACLs, event filters and request options for XuperChain-style blockchains."""

__version__ = "2.0.0"