# src/cheers/__init__.py
"""Cheers or Tears : la marque de bière est-elle à nous, à un concurrent, ou inconnue ?"""

__version__ = "0.1.0"
