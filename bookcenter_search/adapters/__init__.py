# bookcenter_search/adapters/__init__.py

"""Adapters exposing the search core: Python API and CLI"""
