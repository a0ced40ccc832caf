"""
HTTP API for the SocialGen application.
"""
