"""Extension to human-readable type label lookup."""

from __future__ import annotations

from pathlib import Path

from dirpeek.utils import file_extension

DIRECTORY_LABEL = "Directory"
DEFAULT_LABEL = "File"

_TYPE_LABELS: dict[str, str] = {
    # source code
    "rs": "Rust",
    "py": "Python",
    "js": "JavaScript",
    "ts": "TypeScript",
    "cpp": "C++",
    "c": "C",
    "h": "C Header",
    "cs": "C#",
    "java": "Java",
    "rb": "Ruby",
    "php": "PHP",
    "go": "Go",
    "zig": "Zig",
    "sh": "Shell",
    "html": "HTML",
    "css": "CSS",
    # data and config
    "json": "JSON",
    "xml": "XML",
    "toml": "TOML",
    "yaml": "YAML",
    "yml": "YAML",
    "csv": "CSV",
    "tsv": "TSV",
    "ini": "Config",
    "cfg": "Config",
    # documents
    "txt": "Text",
    "log": "Log",
    "md": "Markdown",
    "pdf": "PDF",
    # binaries and keys
    "exe": "Application",
    "dll": "DLL",
    "so": "Shared Library",
    "pem": "Key",
    # archives
    "zip": "Zip Archive",
    "tar": "Tar Archive",
    "gz": "Gzip Archive",
    "xz": "XZ Archive",
    "7z": "7z Archive",
    # media
    "mp3": "MP3 Audio",
    "m4a": "M4A Audio",
    "wav": "WAV Audio",
    "flac": "FLAC Audio",
    "mp4": "MP4 Video",
    "mkv": "MKV Video",
    "webm": "WebM Video",
    "jpg": "JPEG Image",
    "jpeg": "JPEG Image",
    "png": "PNG Image",
    "gif": "GIF Image",
    "svg": "SVG Image",
    "webp": "WebP Image",
}


def classify(extension: str) -> str:
    """Map an extension (with or without leading dot, any case) to a type label."""
    return _TYPE_LABELS.get(extension.lower().lstrip("."), DEFAULT_LABEL)


def classify_path(path: Path | str, is_dir: bool = False) -> str:
    """Type label for a path; directories are always 'Directory'."""
    if is_dir:
        return DIRECTORY_LABEL
    return classify(file_extension(path))
