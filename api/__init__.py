"""
Operations Dashboard API.

REST surface over the dashboard services: navigation, pipeline board,
marketing leads, quotes, orders, deliveries, tasks, team and notifications.
"""

__version__ = "0.1.0"
