"""
lingssg - static site generator for linguistics notes

Pages are written in Markdown and may call template functions such as
``transc`` which turn ASCII ``{code}`` notation into IPA symbols.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
