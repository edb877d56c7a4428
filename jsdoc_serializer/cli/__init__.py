"""Command line interface for jsdoc-serializer."""
