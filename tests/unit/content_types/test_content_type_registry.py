"""Unit tests for ContentTypeRegistry."""

import pytest

from content_type_hub.domain.content_types import ContentTypeRegistry, InvalidConfiguration


@pytest.mark.unit
class TestContentTypeRegistry:
    def setup_method(self):
        self.registry = ContentTypeRegistry()
        self.owner = object()

    def test_acquire_creates_entry(self):
        entry = self.registry.acquire("book", self.owner)

        assert "book" in self.registry
        assert entry.definition is self.owner
        assert not entry.is_registered

    def test_acquire_twice_rejected(self):
        self.registry.acquire("book", self.owner)

        with pytest.raises(InvalidConfiguration) as exc_info:
            self.registry.acquire("book", object())

        assert exc_info.value.content_type == "book"

    def test_acquire_after_release(self):
        self.registry.acquire("book", self.owner)
        self.registry.release("book")

        entry = self.registry.acquire("book", self.owner)

        assert entry.definition is self.owner

    def test_acquire_adopts_recorded_entry(self):
        self.registry.record("book", {"public": True})

        entry = self.registry.acquire("book", self.owner)

        assert entry.arguments == {"public": True}
        assert entry.definition is self.owner

    def test_record_copies_arguments(self):
        arguments = {"public": True}
        self.registry.record("book", arguments)
        arguments["public"] = False

        assert self.registry.get("book").arguments == {"public": True}

    def test_release_unknown_is_ignored(self):
        self.registry.release("missing")

        assert len(self.registry) == 0

    def test_names_exclude_builtin_by_default(self):
        self.registry.record("post", {"supports": []}, builtin=True)
        self.registry.acquire("book", self.owner)

        assert self.registry.names() == ["book"]
        assert self.registry.names(include_builtin=True) == ["post", "book"]

    def test_clear(self):
        self.registry.acquire("book", self.owner)
        self.registry.clear()

        assert list(self.registry) == []
