"""
PyGame front-end of Duel Pong
"""
