"""App instantiation and reload pipelines."""

from applyn.pipeline.lib import LoadResult, instantiate_from_template, load_editor_screens

__all__ = [
    "LoadResult",
    "instantiate_from_template",
    "load_editor_screens",
]
