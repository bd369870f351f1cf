"""A minimal shell, arch, uname, true and false, and the helpers they share."""

__version__ = "0.1.0"