"""
wasend domain layer.

Interfaces the WhatsApp implementations fulfil and the factory that wires
them together.
"""
