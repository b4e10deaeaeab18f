"""Artisign CLI — Typer-based command-line interface.

Provides the ``artisign`` command with subcommands for running a signing
pass and inspecting how filenames are classified.

All output uses Rich for formatted terminal display.
"""
