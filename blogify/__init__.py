"""
blogify - A multi-category publishing backend for Django.

Features:
- Blogs, news and stories stored as one content model
- Related content ranked by tag overlap and recency
- Managed tags with usage-gated deletion
- Reader comments and contact messages
- Token-authenticated admin operations and user profiles
- JSON REST API with a uniform response envelope
"""

__version__ = "0.1.0"
