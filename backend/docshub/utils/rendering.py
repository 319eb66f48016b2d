# docshub/utils/rendering.py
import markdown as md_lib

# Tables plus fenced code blocks with Pygments highlighting
MD_EXTENSIONS = [
    "tables",
    "pymdownx.superfences",
    "pymdownx.highlight",
]
MD_EXTENSION_CONFIGS = {
    "pymdownx.highlight": {
        "guess_lang": False,
        "css_class": "highlight",
        "use_pygments": True,
    },
}


def _markdown_renderer():
    return md_lib.Markdown(
        extensions=MD_EXTENSIONS,
        extension_configs=MD_EXTENSION_CONFIGS,
    )


def render_markdown(text: str | None) -> str:
    """Convert Markdown text to HTML; empty input renders to ''."""
    if not text or not text.strip():
        return ""

    # A fresh renderer per call: Markdown instances keep per-document state
    return _markdown_renderer().convert(text)
