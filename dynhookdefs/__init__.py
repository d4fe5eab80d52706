"""Parse command-line hook definitions into a registry of hook descriptors."""

__version__ = "0.1.0"