"""Command-line entry points for shelflife.

Usage:
    from shelflife.cli.main import main
"""
