"""
Default values for the command line front-end.
"""

DEFAULT_ORDERS = (2, 3)
DEFAULT_DIGITS = 16
