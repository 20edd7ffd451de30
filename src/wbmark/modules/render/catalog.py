"""Reference documentation for built-in components and their attributes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ATTRIBUTE_DOCS",
    "COMPONENT_DOCS",
    "AttributeDoc",
    "ComponentDoc",
]


@dataclass(frozen=True)
class AttributeDoc:
    """Documentation for a component attribute.

    Attributes:
        description: What the attribute controls.
        default: Value used when the attribute is omitted.
        values: Suggested values, if the attribute has a fixed set.
    """

    description: str
    default: str = ""
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class ComponentDoc:
    """Documentation for a component.

    Attributes:
        description: What the component renders.
        block: Whether the component is written as ``::name ... ::``.
        attributes: Attribute names the component reads.
        example: Sample markup.
    """

    description: str
    block: bool = False
    attributes: tuple[str, ...] = ()
    example: str = ""


ATTRIBUTE_DOCS: dict[str, AttributeDoc] = {
    "width": AttributeDoc(
        'Component width (for example "300px" or "50%")',
        default="100%",
        values=("100px", "200px", "300px", "50%", "100%"),
    ),
    "height": AttributeDoc(
        'Component height (for example "200px" or "auto")',
        default="auto",
        values=("100px", "200px", "auto"),
    ),
    "src": AttributeDoc("Image path or URL"),
    "alt": AttributeDoc("Alternative text for the image"),
    "caption": AttributeDoc("Caption shown under the image"),
    "url": AttributeDoc("Video URL"),
    "cover": AttributeDoc("Preview image shown before the video starts"),
    "data": AttributeDoc("JSON array with gallery items", default="[]"),
    "float": AttributeDoc(
        "Horizontal alignment",
        default="none",
        values=("left", "right", "none"),
    ),
    "title": AttributeDoc("Heading shown above the content"),
    "path": AttributeDoc("Included file, relative to the language content directory"),
}


COMPONENT_DOCS: dict[str, ComponentDoc] = {
    "photo": ComponentDoc(
        "A single photo.",
        attributes=("src", "alt", "caption", "width", "float"),
        example=':photo{src="img/cat.png" caption="A cat" width=300}',
    ),
    "gallery": ComponentDoc(
        "A gallery of images.",
        attributes=("data",),
        example=""":gallery{data='[["img/a.png", "First"], ["img/b.png", "Second"]]'}""",
    ),
    "video-player": ComponentDoc(
        "A video player.",
        attributes=("url", "width", "height", "cover", "float"),
        example=':video-player{url="https://example.com/v.mp4" cover="img/v.png"}',
    ),
    "video-gallery": ComponentDoc(
        "A gallery of videos.",
        attributes=("data",),
        example=""":video-gallery{data='[["https://example.com/v.mp4", "Intro"]]'}""",
    ),
    "frontmatter": ComponentDoc(
        "Document header built from the frontmatter block.",
        attributes=("title", "cover", "logo"),
    ),
    "product": ComponentDoc(
        "Product card wrapping its content.",
        block=True,
        example="::product\nText\n::",
    ),
    "product-section": ComponentDoc(
        "Titled section inside a product card.",
        block=True,
        attributes=("title",),
        example='::product-section{title="Features"}\nText\n::',
    ),
    "description": ComponentDoc(
        "Description block.",
        block=True,
        example="::description\nText\n::",
    ),
    "info": ComponentDoc(
        "Highlighted information block.",
        block=True,
        example="::info\nText\n::",
    ),
    "spoiler": ComponentDoc(
        "Collapsible block.",
        block=True,
        attributes=("title",),
        example='::spoiler{title="Details"}\nHidden text\n::',
    ),
    "summary": ComponentDoc(
        "Short summary without paragraph wrapping.",
        block=True,
        example="::summary\nOne line\n::",
    ),
    "content": ComponentDoc(
        "Plain content wrapper.",
        block=True,
        example="::content\nText\n::",
    ),
    "include": ComponentDoc(
        "Inserts another markdown file from the content directory.",
        attributes=("path",),
        example=':include{path="shared/footer"}',
    ),
}
