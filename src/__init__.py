"""
Template placeholder audit and cleanup
"""
