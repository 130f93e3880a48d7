"""
idm CLI commands.
"""
