"""Core decoding algorithms for swfshape.

This module contains the core algorithms for:

- Style layer accumulation (routing edges into per-style segment bags)
- Segment joining (reassembling fragments into continuous subpaths)
- Record walking (pen position, style selection, layer changes)
- Shape assembly (tagging joined paths with their styles)

The decoder, joiner and assembler are:
- Pure (decode_shape has no side effects)
- Single threaded, with no shared state between shapes

Key functions:
- decode_shape: Decode a ShapeDefinition into a Shape
- join_segments: Join segments of one style into a Path
- extract_continuous: Extract one chain from a segment list
- assemble_shape: Turn frozen style layers into a Shape

Key classes:
- ShapeDecoder: Stateful record walker
- StyleLayerBuilder: Active layer accumulator
- StyleLayer: Frozen layer
- ShapeProcessor: Parallel batch decoding of shape files
"""

from swfshape.core.assembler import assemble_layer, assemble_shape
from swfshape.core.decoder import ShapeDecoder, decode_layers, decode_shape
from swfshape.core.joiner import chain_to_commands, extract_continuous, join_segments
from swfshape.core.processor import ShapeProcessor, decode_file
from swfshape.core.style_layer import (
    SegmentSet,
    StyleIndex,
    StyleLayer,
    StyleLayerBuilder,
    resolve_selector,
)

__all__ = [
    # Decoder
    "ShapeDecoder",
    "decode_layers",
    "decode_shape",
    # Layers
    "SegmentSet",
    "StyleIndex",
    "StyleLayer",
    "StyleLayerBuilder",
    "resolve_selector",
    # Joining and assembly
    "assemble_layer",
    "assemble_shape",
    "chain_to_commands",
    "extract_continuous",
    "join_segments",
    # Processor
    "ShapeProcessor",
    "decode_file",
]
