"""
Units that encode or decode data for transport through 7-bit channels.
"""
