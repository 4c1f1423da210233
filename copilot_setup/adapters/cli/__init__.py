"""
CLI adapters
"""
