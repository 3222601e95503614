"""
Hypermedia links on Okta resources.

Okta's ``_links`` object maps a relation name to either a single link object
or an array of link objects. Both shapes are kept distinct here so that the
choice among several candidate links stays an explicit step.
"""

from collections.abc import Mapping

from pydantic import BaseModel, Field, RootModel

from okta_mfa.constants import LinkRelation
from okta_mfa.exceptions import EmptyLinkCollectionError, MissingLinkRelationError
from okta_mfa.utils.logger import logger


class LinkHints(BaseModel):
    """Hints attached to a link, such as the HTTP methods it accepts."""

    model_config = {"frozen": True}

    allow: list[str] = Field(default_factory=list, description="Allowed HTTP methods")


class LinkObject(BaseModel):
    """A single link object as sent by Okta."""

    model_config = {"frozen": True}

    href: str = Field(..., description="Target URL of the link")
    name: str | None = Field(None, description="Link name, when several are listed")
    type: str | None = Field(None, description="Media type of the target")
    hints: LinkHints | None = Field(None, description="Usage hints")


class SingleLink(RootModel[LinkObject]):
    """A relation that resolves to exactly one link."""

    model_config = {"frozen": True}

    @property
    def href(self) -> str:
        return self.root.href


class MultiLink(RootModel[list[LinkObject]]):
    """A relation that resolves to an ordered collection of links."""

    model_config = {"frozen": True}

    @property
    def hrefs(self) -> list[str]:
        return [link.href for link in self.root]


# A JSON object decodes to SingleLink, a JSON array to MultiLink
Link = SingleLink | MultiLink


def resolve_link(links: Mapping[str, Link], relation: str | LinkRelation) -> str:
    """Resolve a relation to the one URL to act on.

    A single link resolves to its href. A link collection resolves to the
    first entry in the order Okta listed it.

    Args:
        links: Relation name to link mapping of a resource
        relation: Relation to resolve (e.g. ``"verify"``)

    Returns:
        The resolved URL

    Raises:
        MissingLinkRelationError: If the relation is absent
        EmptyLinkCollectionError: If the relation maps to an empty collection
    """
    name = relation.value if isinstance(relation, LinkRelation) else relation

    link = links.get(name)
    if link is None:
        logger.warning("Link relation not found", relation=name, available=sorted(links))
        raise MissingLinkRelationError(name)

    if isinstance(link, SingleLink):
        return link.href

    if isinstance(link, MultiLink):
        if not link.root:
            logger.warning("Link relation has an empty collection", relation=name)
            raise EmptyLinkCollectionError(name)
        if len(link.root) > 1:
            logger.debug(
                "Multiple links for relation, using the first",
                relation=name,
                count=len(link.root),
            )
        return link.root[0].href

    raise TypeError(f"Unexpected link value for '{name}': {type(link).__name__}")
