"""
goembed: embed binary files into Go source as byte-slice literals.

Assets are compiled straight into the program, optionally gzip-compressed
and accompanied by a SHA1 digest for integrity checks.
"""

__version__ = "0.3.0"
