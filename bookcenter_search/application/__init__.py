# bookcenter_search/application/__init__.py

"""Application layer: search algorithms and services"""
