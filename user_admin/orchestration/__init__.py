"""Orchestration layer.

The dispatcher turns UI intents into remote calls and lifecycle events. It
should avoid UI concerns.
"""
