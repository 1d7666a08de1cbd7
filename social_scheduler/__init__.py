"""
Social Scheduler - draft, schedule and measure social media posts.
"""
__version__ = "1.0.0"
