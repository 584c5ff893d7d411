"""Utility helpers for navedit."""
