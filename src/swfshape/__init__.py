"""swfshape - Decode SWF shape records into styled vector paths.

A SWF shape is a style table plus a stream of edge and style-change records.
Each edge may belong to a left fill, a right fill and a stroke at the same
time. swfshape walks the record stream, sorts edges into per-style bags and
joins the fragments back into continuous paths tagged with their style.

Example:
    $ swfshape squares.json

This will create squares.decoded.json with one entry per styled path.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
