"""Craifter: session logs, command playback and a scratch todo list."""
