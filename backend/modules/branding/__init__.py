# backend/modules/branding/__init__.py

"""
Brand Settings Module

Stores the single set of brand settings (business name, colors, font,
button style, email footer) used when rendering customer-facing emails
and forms.
"""

__version__ = "1.0.0"
