"""Snapshot serving components.

This module holds the published post index and its refresh loop.
It keeps readers on a consistent snapshot while refreshes run.
"""
