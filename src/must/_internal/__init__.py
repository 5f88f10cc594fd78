"""Internal helpers shared by the raising functions. Not part of the public API."""
