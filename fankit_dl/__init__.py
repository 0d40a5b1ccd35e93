"""Mirror the Princess Connect! Re:Dive fankit catalog to a local directory."""

__version__ = "0.1.0"
