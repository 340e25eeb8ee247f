"""
WebSocket Package

Socket.IO event handlers for the keystroke channel.
"""
