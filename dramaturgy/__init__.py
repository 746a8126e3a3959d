"""Notification API for The Dramaturgy community platform."""
