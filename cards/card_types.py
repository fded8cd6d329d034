"""
Type definitions for the card elements returned by the builders.

These TypedDict classes mirror the Adaptive Card JSON shapes key for key, so
the builders' return values can be type-checked against the schema names the
renderer matches on.
"""

from typing_extensions import Any, Dict, List, Literal, Optional, TypedDict, Union


class TextBlockElement(TypedDict):
    """https://adaptivecards.io/explorer/TextBlock.html"""
    type: Literal["TextBlock"]
    text: str
    color: Optional[str]
    fontType: Optional[str]
    horizontalAlignment: str
    isSubtle: bool
    maxLines: Optional[int]
    size: Optional[str]
    weight: Optional[str]
    wrap: bool
    style: str
    height: Optional[str]
    separator: bool
    spacing: Optional[str]
    id: Optional[str]
    isVisible: bool


class TextRunElement(TypedDict):
    """https://adaptivecards.io/explorer/TextRun.html"""
    type: Literal["TextRun"]
    text: str
    color: Optional[str]
    fontType: Optional[str]
    highlight: bool
    isSubtle: bool
    italic: bool
    selectAction: Optional[Dict[str, Any]]
    strikethrough: bool
    underline: bool
    size: Optional[str]
    weight: Optional[str]


class RichTextBlockElement(TypedDict):
    """https://adaptivecards.io/explorer/RichTextBlock.html"""
    type: Literal["RichTextBlock"]
    inlines: List[Union[str, TextRunElement]]
    horizontalAlignment: str
    height: Optional[str]
    separator: bool
    spacing: Optional[str]
    id: Optional[str]
    isVisible: bool


class ZoomSettings(TypedDict, total=False):
    """Teams extension block of an Image; empty unless zoom is enabled."""
    allowExpand: bool


class ImageElement(TypedDict):
    """https://adaptivecards.io/explorer/Image.html"""
    type: Literal["Image"]
    url: str
    altText: str
    backgroundColor: Optional[str]
    height: Optional[Union[str, int]]
    horizontalAlignment: str
    selectAction: Optional[Dict[str, Any]]
    size: Optional[str]
    style: Optional[str]
    width: Optional[Union[str, int]]
    separator: bool
    spacing: Optional[str]
    id: Optional[str]
    isVisible: bool
    msTeams: ZoomSettings


class MediaSourceElement(TypedDict):
    """https://adaptivecards.io/explorer/MediaSource.html"""
    mimeType: str
    url: str


class MediaElement(TypedDict):
    """https://adaptivecards.io/explorer/Media.html"""
    type: Literal["Media"]
    sources: List[MediaSourceElement]
    poster: Optional[str]
    altText: Optional[str]
    height: Optional[str]
    separator: bool
    spacing: Optional[str]
    id: Optional[str]
    isVisible: bool


class PersonProperties(TypedDict):
    """A user identity renamed to the Microsoft Graph field names."""
    id: Optional[str]
    displayName: Optional[str]
    userPrincipalName: Optional[str]


class PeopleSetProperties(TypedDict):
    users: List[PersonProperties]


class PeopleIconElement(TypedDict):
    """Teams people icon (persona) component."""
    type: Literal["Component"]
    name: Literal["graph.microsoft.com/user", "graph.microsoft.com/users"]
    view: Literal["compact"]
    properties: Union[PersonProperties, PeopleSetProperties]
