"""src/uriscan/version.py

Version information for Uriscan.
"""

__version__ = "0.1.0"
