from .visibility import rasterize_line, reveal, reveal_spawn

__all__ = ["rasterize_line", "reveal", "reveal_spawn"]
