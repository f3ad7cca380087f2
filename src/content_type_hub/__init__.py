"""
content_type_hub - configuration-driven content types for a content host.

Merges per-type configuration with host defaults (labels, supports, feed
membership, admin columns) and registers the result with the host.
"""

__version__ = "0.1.0"
