"""
Solar report extraction services
"""
