"""Generate io-ts codecs from GraphQL schemas and operations."""

__version__ = "0.1.0"
