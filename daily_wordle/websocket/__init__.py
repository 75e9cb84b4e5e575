"""
Socket.IO event handlers.
"""
