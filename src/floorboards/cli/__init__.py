"""Command line interface for floorboards."""
