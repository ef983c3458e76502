"""
Redis plugin package.

Provides the create and terminate actions for managed Redis instances.
"""

from plugins.redis.actions import RedisPlugin

__all__ = ["RedisPlugin"]
