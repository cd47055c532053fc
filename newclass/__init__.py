"""newclass -- boilerplate generator for new classes in namespaced projects."""

__version__ = "0.1.0"
