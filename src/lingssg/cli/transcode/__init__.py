"""Transcode commands."""
