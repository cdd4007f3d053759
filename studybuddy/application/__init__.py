"""
Application layer: service orchestrators and provider adapters.
"""
