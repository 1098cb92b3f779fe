# Copyright (c) FieldOps.
# Licensed under the MIT license.

"""
Field attachment options and their multipart encoding.

An attachment targets one field of a persisted record and is either an
uploaded file (:class:`FileAttachment`) or a reference to an external URL
(:class:`LinkAttachment`). The two are separate types, so one request can never
carry both payload kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, ClassVar, List, Optional, Tuple, Union

from ..common.constants import REPLACE_FLAG_FALSE, REPLACE_FLAG_TRUE
from ..core._error_codes import VALIDATION_ATTACHMENT_PAYLOAD_MISSING, VALIDATION_UNKNOWN_FIELD_GROUP
from ..core.errors import ValidationError
from .field import Field
from .template_type import FieldGroup, TemplateType

# One multipart part as ``requests`` accepts it in ``files=``:
# ``(name, (filename, content))``; text parts use ``filename=None``.
MultipartPart = Tuple[str, Tuple[Optional[str], Any]]

FilePayload = Union[bytes, IO[bytes]]


def _coerce_group(group: Union[FieldGroup, str]) -> FieldGroup:
    try:
        return FieldGroup(group)
    except ValueError:
        raise ValidationError(
            f"Unknown field group {group!r}; expected 'default' or 'dynamic'",
            subcode=VALIDATION_UNKNOWN_FIELD_GROUP,
        ) from None


@dataclass(frozen=True)
class FileAttachment:
    """
    Upload a binary file into a record field.

    :param field: Target field.
    :type field: ~FieldOps.Crm.models.field.Field
    :param group: Group the target field belongs to.
    :type group: FieldGroup | str
    :param file: File content, as bytes or a binary file object.
    :type file: bytes | BinaryIO
    :param replace: Overwrite existing attachments of the field instead of appending.
    :type replace: bool
    :param filename: Optional filename override.
    :type filename: str | None

    Example::

        with open("site.jpg", "rb") as fh:
            client.records.upload_attachment(
                TemplateType.Job, ref_id,
                FileAttachment(field=photo_field, group=FieldGroup.DYNAMIC, file=fh, filename="site.jpg"),
            )
    """

    field: Field
    group: FieldGroup
    file: FilePayload
    replace: bool = False
    filename: Optional[str] = None

    filetype: ClassVar[str] = "file"

    def __post_init__(self) -> None:
        object.__setattr__(self, "group", _coerce_group(self.group))
        if self.file is None:
            raise ValidationError(
                "FileAttachment requires file content",
                subcode=VALIDATION_ATTACHMENT_PAYLOAD_MISSING,
            )


@dataclass(frozen=True)
class LinkAttachment:
    """
    Attach an external URL to a record field.

    :param field: Target field.
    :type field: ~FieldOps.Crm.models.field.Field
    :param group: Group the target field belongs to.
    :type group: FieldGroup | str
    :param link: URL to attach; sent in its string form.
    :type link: str
    :param replace: Overwrite existing attachments of the field instead of appending.
    :type replace: bool
    :param filename: Optional display filename.
    :type filename: str | None
    """

    field: Field
    group: FieldGroup
    link: str
    replace: bool = False
    filename: Optional[str] = None

    filetype: ClassVar[str] = "link"

    def __post_init__(self) -> None:
        object.__setattr__(self, "group", _coerce_group(self.group))
        if self.link is None or not str(self.link):
            raise ValidationError(
                "LinkAttachment requires a URL",
                subcode=VALIDATION_ATTACHMENT_PAYLOAD_MISSING,
            )


UploadAttachmentOptions = Union[FileAttachment, LinkAttachment]


@dataclass(frozen=True)
class AttachmentRequest:
    """Ordered multipart parts for one attachment upload."""

    parts: List[MultipartPart]

    def names(self) -> List[str]:
        return [name for name, _ in self.parts]

    def get(self, name: str) -> Any:
        """Return the content of the first part called ``name``, or ``None``."""
        for part_name, (_, content) in self.parts:
            if part_name == name:
                return content
        return None


class AttachmentRequestBuilder:
    """
    Builds the multipart body of an attachment upload.

    Parts: ``type``, ``ref_id``, ``lbl_id``, ``field_type``, then ``file`` or
    ``link``, then ``replace`` as the string ``"1"`` or ``"0"``, and
    ``filename`` when given.
    """

    @staticmethod
    def build(
        type: Union[TemplateType, int],
        ref_id: str,
        attachment: UploadAttachmentOptions,
    ) -> AttachmentRequest:
        if not isinstance(attachment, (FileAttachment, LinkAttachment)):
            raise TypeError("attachment must be FileAttachment or LinkAttachment")
        parts: List[MultipartPart] = [
            ("type", (None, str(int(type)))),
            ("ref_id", (None, ref_id)),
            ("lbl_id", (None, attachment.field.lbl_id)),
            ("field_type", (None, attachment.group.value)),
        ]
        if isinstance(attachment, FileAttachment):
            parts.append(("file", (attachment.filename or "file", attachment.file)))
        else:
            parts.append(("link", (None, str(attachment.link))))
        parts.append(("replace", (None, REPLACE_FLAG_TRUE if attachment.replace else REPLACE_FLAG_FALSE)))
        if attachment.filename:
            parts.append(("filename", (None, attachment.filename)))
        return AttachmentRequest(parts)


__all__ = [
    "FileAttachment",
    "LinkAttachment",
    "UploadAttachmentOptions",
    "AttachmentRequest",
    "AttachmentRequestBuilder",
]
