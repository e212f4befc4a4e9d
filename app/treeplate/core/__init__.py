"""Core configuration for treeplate.

This module provides XDG path handling and CLI theming.
"""
