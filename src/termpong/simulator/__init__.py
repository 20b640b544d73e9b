"""Headless simulator support for termpong."""
