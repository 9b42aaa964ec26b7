"""Grammar shell - validate operator command lines against a command grammar."""

__version__ = "0.1.0"
