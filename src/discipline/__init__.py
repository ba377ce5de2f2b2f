"""Discipline - habit tracking backend."""
