"""
Extraction configuration
"""
