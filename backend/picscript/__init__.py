"""picscript: a line-art picture language interpreter producing resolved scene graphs."""

__version__ = "0.1.0"
