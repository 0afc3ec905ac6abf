# bookcenter_search/core/__init__.py

"""Core domain and type definitions"""
