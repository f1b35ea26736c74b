"""
CopySpark: ad copy, social posts and SEO metadata from a generative model.
"""

__version__ = "0.1.0"
