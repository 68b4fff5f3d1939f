"""templatebind - binding model for document template placeholders."""

__version__ = "0.1.0"
