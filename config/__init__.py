"""
Configuration Package

Project-wide settings (config.settings), loaded from environment / .env.
"""
