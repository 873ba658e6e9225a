"""Normalization of GroupMe JSON into InboundMessage."""

from typing import Any

from pydantic import ValidationError

from ..errors import MalformedPayload
from ..models import (
    Attachment,
    ImageAttachment,
    InboundMessage,
    Reactor,
    ReplyAttachment,
    SenderType,
    UnknownAttachment,
)
from .schemas import (
    GroupMeCallback,
    GroupMeImage,
    GroupMeReactor,
    GroupMeReply,
    describe_validation_error,
)


def _to_attachment(model: Any) -> Attachment:
    if isinstance(model, GroupMeImage) and model.url:
        return ImageAttachment(url=model.url)
    if isinstance(model, GroupMeReply):
        return ReplyAttachment(
            target_id=model.reply_id or None,
            base_target_id=model.base_reply_id or None,
        )
    return UnknownAttachment(type=model.type or "unknown")


def _to_reactor(entry: GroupMeReactor | str) -> Reactor:
    if isinstance(entry, GroupMeReactor):
        return Reactor(
            user_id=entry.user_id or entry.id or None,
            nickname=entry.nickname or None,
            emoji=entry.emoji or None,
            image_url=entry.image_url or None,
        )
    return Reactor(user_id=entry or None)


def parse_groupme_message(raw: Any) -> InboundMessage:
    """Build an InboundMessage from a webhook body or a history entry.

    Raises:
        MalformedPayload: body does not validate as a GroupMe message.
    """
    try:
        body = GroupMeCallback.model_validate(raw)
    except ValidationError as e:
        raise MalformedPayload(describe_validation_error(e)) from e

    sender_type = SenderType.BOT if body.sender_type == "bot" else SenderType.USER
    return InboundMessage(
        id=body.id or "",
        group_id=body.group_id or "",
        user_id=body.user_id or body.sender_id or "",
        name=body.name or "",
        text=body.text or None,
        attachments=tuple(_to_attachment(a) for a in body.attachments or ()),
        sender_type=sender_type,
        avatar_url=body.avatar_url or None,
        reactors=tuple(_to_reactor(r) for r in body.favorited_by or ()),
        created_at=body.created_at,
    )
