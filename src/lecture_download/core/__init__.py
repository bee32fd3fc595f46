"""Core / service layer — domain models, pure logic and orchestration.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``; external systems are reached only
  through :mod:`lecture_download.core.protocols`.
"""

from lecture_download.core.download_service import DownloadService
from lecture_download.core.media_service import MediaService
from lecture_download.core.metadata_service import MetadataService
from lecture_download.core.models import (
    DownloadedVideo,
    EncodingSettings,
    FormatCollection,
    PipelineResult,
    PipelineStage,
    ResolvedVideo,
    VideoFormat,
    VideoMetadata,
)
from lecture_download.core.pipeline import Pipeline
from lecture_download.core.protocols import (
    CommandRunner,
    DownloadProvider,
    MetadataProvider,
    WorkspaceLayout,
)

__all__: list[str] = [
    "CommandRunner",
    "DownloadProvider",
    "DownloadService",
    "DownloadedVideo",
    "EncodingSettings",
    "FormatCollection",
    "MediaService",
    "MetadataProvider",
    "MetadataService",
    "Pipeline",
    "PipelineResult",
    "PipelineStage",
    "ResolvedVideo",
    "VideoFormat",
    "VideoMetadata",
    "WorkspaceLayout",
]
