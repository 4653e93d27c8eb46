"""Provider protocols and schemas."""

from journey.tools.interfaces import IsochroneInput, IsochroneTool, PlaceSearchInput, PlaceTool

__all__ = ["IsochroneInput", "IsochroneTool", "PlaceSearchInput", "PlaceTool"]
