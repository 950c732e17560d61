"""
Pure codec functions: charsets, quoted-printable, Radix64, bit strings, line wrapping and header
field names, together with the logging and configuration helpers used by the units.
"""
