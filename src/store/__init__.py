"""Post storage and query layer.

This module indexes parsed posts by slug, tag, series, and month.
It powers navigation summaries and lookups for the SDK.
"""
