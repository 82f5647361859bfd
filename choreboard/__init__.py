"""Household chores, badges and flats REST backend."""
