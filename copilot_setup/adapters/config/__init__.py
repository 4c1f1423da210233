"""
Configuration adapters
"""
