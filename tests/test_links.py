"""Tests for hypermedia link decoding and resolution."""

import pytest
from pydantic import TypeAdapter, ValidationError

from okta_mfa.constants import LinkRelation
from okta_mfa.exceptions import (
    EmptyLinkCollectionError,
    LinkResolutionError,
    MissingLinkRelationError,
)
from okta_mfa.links import Link, LinkObject, MultiLink, SingleLink, resolve_link

links_adapter = TypeAdapter(dict[str, Link])


class TestLinkDecoding:
    """A JSON object is a single link, a JSON array is a link collection."""

    def test_object_decodes_to_single_link(self):
        links = links_adapter.validate_python(
            {"verify": {"href": "https://a.example/verify", "hints": {"allow": ["POST"]}}}
        )

        link = links["verify"]
        assert isinstance(link, SingleLink)
        assert link.href == "https://a.example/verify"
        assert link.root.hints.allow == ["POST"]

    def test_array_decodes_to_multi_link(self):
        links = links_adapter.validate_python(
            {
                "verify": [
                    {"href": "https://a.example/1", "name": "first"},
                    {"href": "https://a.example/2", "name": "second"},
                ]
            }
        )

        link = links["verify"]
        assert isinstance(link, MultiLink)
        assert link.hrefs == ["https://a.example/1", "https://a.example/2"]

    def test_empty_array_decodes_to_empty_multi_link(self):
        links = links_adapter.validate_python({"verify": []})

        assert isinstance(links["verify"], MultiLink)
        assert links["verify"].root == []


class TestResolveLink:
    """Test cases for resolve_link."""

    def test_single_link_resolves_to_href(self):
        links = {"verify": SingleLink(LinkObject(href="https://a.example/u"))}

        assert resolve_link(links, "verify") == "https://a.example/u"

    def test_multi_link_resolves_to_first_entry(self):
        links = {
            "verify": MultiLink(
                [
                    LinkObject(href="https://a.example/u1"),
                    LinkObject(href="https://a.example/u2"),
                ]
            )
        }

        assert resolve_link(links, "verify") == "https://a.example/u1"

    def test_accepts_relation_enum(self):
        links = {"verify": SingleLink(LinkObject(href="https://a.example/u"))}

        assert resolve_link(links, LinkRelation.VERIFY) == "https://a.example/u"

    def test_empty_multi_link_is_protocol_error(self):
        links = {"verify": MultiLink([])}

        with pytest.raises(EmptyLinkCollectionError) as exc_info:
            resolve_link(links, "verify")

        assert exc_info.value.relation == "verify"
        assert isinstance(exc_info.value, LinkResolutionError)

    def test_missing_relation_is_protocol_error(self):
        links = {"cancel": SingleLink(LinkObject(href="https://a.example/cancel"))}

        with pytest.raises(MissingLinkRelationError) as exc_info:
            resolve_link(links, LinkRelation.VERIFY)

        assert exc_info.value.relation == "verify"
        assert "verify" in str(exc_info.value)

    def test_missing_relation_on_empty_links(self):
        with pytest.raises(LinkResolutionError):
            resolve_link({}, "verify")


class TestLinkImmutability:
    """Decoded links cannot be modified."""

    def test_link_object_is_frozen(self):
        link = LinkObject(href="https://a.example/verify")

        with pytest.raises(ValidationError):
            link.href = "https://b.example/verify"

    def test_single_link_is_frozen(self):
        link = links_adapter.validate_python({"verify": {"href": "https://a.example"}})

        with pytest.raises(ValidationError):
            link["verify"].root = LinkObject(href="https://b.example")
