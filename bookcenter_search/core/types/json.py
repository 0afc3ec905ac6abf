# bookcenter_search/core/types/json.py

"""JSON type definitions for type-safe JSON handling."""

# JSON Type Usage Guide:
# - JSONDict: When you KNOW it's a dict with string keys (e.g., loaded config files, book records)
# - JSONList: When you KNOW it's a list (e.g., array of records, list of values)
# - JSONType: When it could be either or you're accessing nested data

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
