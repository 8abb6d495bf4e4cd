"""Internal helpers shared by Option and Result. Not part of the public API."""
