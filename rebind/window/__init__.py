"""Window-layer input source adapters."""

from rebind.window.rendercanvas_source import (
    RenderCanvasInputSource,
    create_rendercanvas_input_source,
)

__all__ = ["RenderCanvasInputSource", "create_rendercanvas_input_source"]
