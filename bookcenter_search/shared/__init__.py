# bookcenter_search/shared/__init__.py

"""Shared helpers used across layers"""
