"""
Study tracker core package.

This package currently focuses on the outline parsing subsystem. It exposes
dataclasses for subjects and tasks, and a parser that turns a plain-text
outline (``##`` headers followed by checkbox task lines) into per-subject
completion counts.
"""
