"""Request body models for the GroupMe and Discord webhooks."""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    Discriminator,
    Tag,
    ValidationError,
    model_validator,
)


def _number_to_str(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# GroupMe and Discord ids are numeric strings, sometimes sent as JSON numbers
Identifier = Annotated[str, BeforeValidator(_number_to_str)]


class GroupMeImage(BaseModel):
    """Image attachment."""

    type: Literal["image"]
    url: str | None = None


class GroupMeReply(BaseModel):
    """Reply attachment set by the GroupMe client."""

    type: Literal["reply"]
    reply_id: Identifier | None = None
    base_reply_id: Identifier | None = None


class GroupMeOtherAttachment(BaseModel):
    """Location, emoji, split and any future attachment type."""

    type: str | None = None


def _attachment_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if kind in ("image", "reply") else "other"


GroupMeAttachment = Annotated[
    Union[
        Annotated[GroupMeImage, Tag("image")],
        Annotated[GroupMeReply, Tag("reply")],
        Annotated[GroupMeOtherAttachment, Tag("other")],
    ],
    Discriminator(_attachment_tag),
]


class GroupMeReactor(BaseModel):
    """Object form of a favorited_by entry."""

    user_id: Identifier | None = None
    id: Identifier | None = None
    nickname: str | None = None
    emoji: str | None = None
    image_url: str | None = None


class GroupMeCallback(BaseModel):
    """GroupMe bot callback body, also the shape of a history entry."""

    id: Identifier | None = None
    group_id: Identifier | None = None
    user_id: Identifier | None = None
    sender_id: Identifier | None = None
    name: str | None = None
    text: str | None = None
    sender_type: str | None = None
    avatar_url: str | None = None
    created_at: int | None = None
    attachments: list[GroupMeAttachment] | None = None
    # Object entries on reaction callbacks, bare user ids in the Groups API
    favorited_by: list[GroupMeReactor | Identifier] | None = None

    @model_validator(mode="after")
    def _require_id(self) -> "GroupMeCallback":
        # reaction callbacks are still forwarded without a message id
        if not self.id and not self.favorited_by:
            raise ValueError("GroupMe payload has no message id")
        return self


class DiscordAuthor(BaseModel):
    """Discord user object."""

    username: str | None = None
    global_name: str | None = None
    bot: bool | None = None


class DiscordPayload(BaseModel):
    """Body posted to /discord by the Discord side of the bridge."""

    author: DiscordAuthor | str | None = None
    content: str | None = None
    webhook_id: Identifier | None = None


def describe_validation_error(error: ValidationError) -> str:
    """One-line summary of the first validation problem."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
