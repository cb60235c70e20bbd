"""Report deployments to the DX developer-experience platform."""

__version__ = "1.0.0"
