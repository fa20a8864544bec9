"""Control-flow graphs with nested scopes, clock zones and supporting data structures."""

__version__ = "0.1.0"