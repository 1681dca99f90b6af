"""
Duel Pong: a two-player Pong played between a top and a bottom paddle
"""
