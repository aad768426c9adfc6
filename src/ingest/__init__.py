"""Post ingestion pipeline.

This module reads post source trees and parses documents into posts.
It prepares sealed index snapshots for the store and serve layers.
"""
