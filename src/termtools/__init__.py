"""
Terminal toolkit: a constrained password generator plus small encoding,
hashing and UUID utilities.
"""

__version__ = '0.1.0'
