"""
SocialGen: per-platform social media posts and image adaptation.
"""

__version__ = "1.0.0"
