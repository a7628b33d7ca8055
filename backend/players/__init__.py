"""
Player implementations for the snake game.

This module contains the abstractions that decide which way the snake
turns: automated players and the keyboard bindings used by human hosts.
"""

from .base import Player
from .random_player import RandomPlayer
from .key_bindings import KeyAction, KeyCommand, KEY_DIRECTIONS, PAUSE_KEYS, RESTART_KEYS, resolve_key

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyAction',
    'KeyCommand',
    'KEY_DIRECTIONS',
    'PAUSE_KEYS',
    'RESTART_KEYS',
    'resolve_key',
]
