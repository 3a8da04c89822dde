"""Types and wire projections for the git data resource.

Every field is optional. A missing key means the field is absent on the wire;
``None`` is treated the same way and is never encoded.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypedDict
from typing_extensions import ReadOnly

__all__ = [
    "CommitAuthor",
    "CreateTagRequest",
    "GitObject",
    "SignatureVerification",
    "Tag",
    "decode_tag",
    "tag_to_create_request",
]


class CommitAuthor(TypedDict, total=False):
    """Tagger or author identity."""
    date: ReadOnly[str]
    name: ReadOnly[str]
    email: ReadOnly[str]
    username: ReadOnly[str]


class GitObject(TypedDict, total=False):
    """Reference to the object a tag points at."""
    type: ReadOnly[str]
    sha: ReadOnly[str]
    url: ReadOnly[str]


class SignatureVerification(TypedDict, total=False):
    verified: ReadOnly[bool]
    reason: ReadOnly[str]
    signature: ReadOnly[str]
    payload: ReadOnly[str]


class Tag(TypedDict, total=False):
    """Annotated tag object as returned by ``git/tags`` endpoints."""
    tag: ReadOnly[str]
    sha: ReadOnly[str]
    url: ReadOnly[str]
    message: ReadOnly[str]
    tagger: ReadOnly[CommitAuthor]
    object: ReadOnly[GitObject]
    verification: ReadOnly[SignatureVerification]
    node_id: ReadOnly[str]


class CreateTagRequest(TypedDict, total=False):
    """Body of a create-tag request.

    Same as :class:`Tag` except the target SHA and type are top-level string
    fields instead of a nested ``object``.
    """
    tag: str
    message: str
    object: str
    type: str
    tagger: CommitAuthor


_NESTED_TAG_FIELDS = ("tagger", "object", "verification")


def _drop_none(value: Mapping[str, Any]) -> dict[str, Any]:
    return {key: item for key, item in value.items() if item is not None}


def decode_tag(payload: Mapping[str, Any]) -> Tag:
    """Return ``payload`` as a :class:`Tag`, dropping JSON nulls.

    Nested ``tagger``, ``object`` and ``verification`` mappings are cleaned
    the same way so re-encoding never produces explicit nulls.
    """
    tag = _drop_none(payload)
    for key in _NESTED_TAG_FIELDS:
        nested = tag.get(key)
        if isinstance(nested, Mapping):
            tag[key] = _drop_none(nested)
    return tag  # type: ignore[return-value]


def tag_to_create_request(tag: Tag) -> CreateTagRequest:
    """Project a :class:`Tag` into the create-tag wire shape.

    Only ``tag``, ``message`` and ``tagger`` are copied; ``object.sha`` and
    ``object.type`` become the top-level ``object`` and ``type``. Fields the
    server assigns on creation (``sha``, ``url``, ``verification``,
    ``node_id``) are dropped.
    """
    request: CreateTagRequest = {}
    for key in ("tag", "message"):
        value = tag.get(key)
        if value is not None:
            request[key] = value  # type: ignore[literal-required]

    target: Optional[GitObject] = tag.get("object")
    if target is not None:
        if target.get("sha") is not None:
            request["object"] = target["sha"]
        if target.get("type") is not None:
            request["type"] = target["type"]

    tagger: Optional[CommitAuthor] = tag.get("tagger")
    if tagger is not None:
        request["tagger"] = _drop_none(tagger)  # type: ignore[typeddict-item]
    return request
