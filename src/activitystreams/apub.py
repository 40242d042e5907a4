"""ActivityPub extension field sets and well-known IRIs.

ActivityPub layers extra properties over ActivityStreams objects and
actors.  They are modelled as standalone field sets meant to be paired
with a base wrapper through ``Ext``::

    from activitystreams.actor import Person
    from activitystreams.apub import ApActorProperties
    from activitystreams.ext import Ext

    actor = Ext.from_raw(raw, base=Person, extension=ApActorProperties)
    actor.extension.inbox    # XsdAnyUri
    actor.base.name          # OneOrMany[AnyString]
"""
from __future__ import annotations

from typing import Final

from activitystreams.fields import Field
from activitystreams.node import Properties
from activitystreams.primitives import XsdAnyUri
from activitystreams.shapes import NestedShape, StringShape, UnionShape, UriShape
from activitystreams.unions import AnyBase

CONTEXT_IRI: Final[str] = "https://www.w3.org/ns/activitystreams"
SECURITY_IRI: Final[str] = "https://w3id.org/security/v1"
PUBLIC_IRI: Final[str] = "https://www.w3.org/ns/activitystreams#Public"


def context() -> XsdAnyUri:
    """The ActivityStreams JSON-LD context IRI."""
    return XsdAnyUri(CONTEXT_IRI)


def security() -> XsdAnyUri:
    """The W3C security vocabulary context IRI."""
    return XsdAnyUri(SECURITY_IRI)


def public() -> XsdAnyUri:
    """The special collection addressing every actor."""
    return XsdAnyUri(PUBLIC_IRI)


class EndpointProperties(Properties):
    """Server-wide endpoints an actor advertises under ``endpoints``."""

    proxy_url = Field("proxyUrl", UriShape(), functional=True)
    oauth_authorization_endpoint = Field("oauthAuthorizationEndpoint", UriShape(), functional=True)
    oauth_token_endpoint = Field("oauthTokenEndpoint", UriShape(), functional=True)
    provide_client_key = Field("provideClientKey", UriShape(), functional=True)
    sign_client_key = Field("signClientKey", UriShape(), functional=True)
    shared_inbox = Field("sharedInbox", UriShape(), functional=True)


class ApObjectProperties(Properties):
    """ActivityPub additions available on every object."""

    shares = Field("shares", UriShape(), functional=True)
    likes = Field("likes", UriShape(), functional=True)
    source = Field("source", UnionShape(AnyBase), functional=True)
    upload_media = Field("uploadMedia", UriShape())


class ApActorProperties(Properties):
    """ActivityPub additions required of actors.

    ``inbox`` and ``outbox`` must be present when parsing.
    """

    inbox = Field("inbox", UriShape(), functional=True, required=True)
    outbox = Field("outbox", UriShape(), functional=True, required=True)
    following = Field("following", UriShape(), functional=True)
    followers = Field("followers", UriShape(), functional=True)
    liked = Field("liked", UriShape(), functional=True)
    streams = Field("streams", UriShape())
    preferred_username = Field("preferredUsername", StringShape(), functional=True)
    endpoints = Field("endpoints", NestedShape(EndpointProperties), functional=True)


__all__ = [
    "ApActorProperties",
    "ApObjectProperties",
    "CONTEXT_IRI",
    "EndpointProperties",
    "PUBLIC_IRI",
    "SECURITY_IRI",
    "context",
    "public",
    "security",
]
