"""Content build pipeline."""

from shelfsite.build.pipeline import BuildResult, ContentBuildPipeline, serialize_manifest, shelves_for_site

__all__ = [
    "BuildResult",
    "ContentBuildPipeline",
    "serialize_manifest",
    "shelves_for_site",
]
