"""Application composition layer for the Tkinter shell.

Modules in this package wire views, view models, adapters, and decorators
into runnable list screens without placing loading logic in views.
"""
