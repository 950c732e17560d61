"""
Units that operate on text.
"""
