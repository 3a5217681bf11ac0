"""Generate cross-linked Markdown reference docs from a custom elements manifest."""

__version__ = "0.1.0"
