"""
Qt Renderer integration.

FormBinder connects PyQt6 adapter widgets to a FormEngine.
"""

from .form_binder import FormBinder

__all__ = ["FormBinder"]
