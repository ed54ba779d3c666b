"""
Static category table and extension classifier.

Categories are declared once, in precedence order. An extension listed under
more than one category (``pdf`` is both a document and a book) goes to the
first category declared.
"""

from types import MappingProxyType

FALLBACK_CATEGORY = "Others"

# Order matters: classify() returns the first category that lists an extension.
_CATEGORY_DECLARATIONS: list[tuple[str, tuple[str, ...]]] = [
    # Documents
    ("Documents", ("pdf", "doc", "docx", "rtf", "txt", "md", "markdown", "odt", "oxps")),
    ("Sheets", ("xls", "xlsx", "csv", "ods")),
    ("Slides", ("ppt", "pptx", "key")),
    # Media
    ("Images", ("jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tiff", "heic")),
    ("Audio", ("mp3", "wav", "m4a", "flac", "aac", "ogg")),
    ("Videos", ("mp4", "mov", "mkv", "avi", "webm")),
    # Code & data
    ("Code", (
        "c", "cpp", "h", "hpp", "rs", "py", "js", "ts", "tsx", "java",
        "go", "rb", "sh", "yaml", "yml", "json", "toml",
    )),
    ("Books", ("epub", "mobi", "azw", "azw3", "pdf")),
    # Archives & installers
    ("Archives", ("zip", "rar", "7z", "tar", "gz", "bz2", "xz")),
    ("Installer", ("dmg", "pkg", "msi", "exe", "deb", "rpm", "appimage", "app")),
    # Design/graphics
    ("Design", ("psd", "ai", "xd", "fig", "sketch")),
]

CATEGORY_EXTENSIONS = MappingProxyType({
    name: frozenset(exts) for name, exts in _CATEGORY_DECLARATIONS
})


def file_extension(filename: str) -> str:
    """
    Return the lowercased extension of a file name, without the dot.

    ``archive.tar.gz`` -> ``gz``; ``.bashrc`` and ``README`` -> ``''``.
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return ""
    return ext.lower()


def classify(extension: str) -> str | None:
    """
    Map an extension to its category name.

    Args:
        extension: Extension without the leading dot (a dot is tolerated).

    Returns:
        The first category (in declaration order) listing the extension,
        or None if no category matches or the extension is empty.
    """
    ext = extension.lower().lstrip(".")
    if not ext:
        return None
    for category, extensions in CATEGORY_EXTENSIONS.items():
        if ext in extensions:
            return category
    return None
