"""Teaching examples: a binary search tree, linear and binary search, and HTTP request builders."""

__version__ = "0.1.0"