"""
DisasterWatch - REST API
"""
