# bookcenter_search/infrastructure/__init__.py

"""Infrastructure layer: configuration, logging and persistence"""
