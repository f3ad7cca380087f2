"""Unit tests for ContentTypeProvider."""

import pytest

from content_type_hub.config.schema import ProviderEntry
from content_type_hub.domain.content_types import ContentTypeDefinition, InvalidConfiguration
from content_type_hub.orchestration import ContentTypeProvider


@pytest.fixture
def provider(host):
    provider = ContentTypeProvider(host)
    yield provider
    provider.close()


@pytest.mark.unit
class TestContentTypeProvider:
    def test_default_structure(self):
        assert ContentTypeProvider.get_default_structure() == {
            "autoload": False,
            "postTypeName": "",
            "config": {},
            "enablePermalinkHandlers": False,
            "permalinkHandlers": {},
        }

    def test_autoload_instantiates_immediately(self, provider, host, book_config):
        definition = provider.provide(
            {"autoload": True, "postTypeName": "book", "config": book_config}
        )

        assert isinstance(definition, ContentTypeDefinition)
        assert definition.name == "book"
        assert provider.instantiated() == ["book"]
        assert "book" in host.registry

    def test_lazy_entry_waits_for_get(self, provider, host, book_config):
        assert provider.provide({"postTypeName": "book", "config": book_config}) is None
        assert provider.instantiated() == []
        assert "book" not in host.registry

        definition = provider.get("book")

        assert provider.get("book") is definition
        assert provider.instantiated() == ["book"]

    def test_accepts_provider_entry_models(self, provider, book_config):
        entry = ProviderEntry(autoload=True, post_type_name="book", config=book_config)

        assert provider.provide(entry).name == "book"

    def test_definitions_share_the_gateway(self, provider, book_config):
        book = provider.provide({"autoload": True, "postTypeName": "book", "config": book_config})
        movie = provider.provide(
            {"autoload": True, "postTypeName": "movie", "config": {"pluralName": "Movies"}}
        )

        assert book.gateway is provider.gateway
        assert movie.gateway is provider.gateway
        assert provider.gateway.is_bound("book")
        assert provider.gateway.is_bound("movie")

    def test_unknown_name_raises_key_error(self, provider):
        with pytest.raises(KeyError):
            provider.get("missing")

    def test_duplicate_entry_rejected(self, provider, book_config):
        provider.provide({"postTypeName": "book", "config": book_config})

        with pytest.raises(InvalidConfiguration):
            provider.provide({"postTypeName": "book", "config": book_config})

    def test_invalid_entry_rejected(self, provider):
        with pytest.raises(InvalidConfiguration) as exc_info:
            provider.provide({"postTypeName": "book", "config": "nope"})

        assert exc_info.value.content_type == "book"
        assert provider.names() == []

    def test_failing_autoload_removes_entry(self, provider, host):
        with pytest.raises(InvalidConfiguration):
            provider.provide({"autoload": True, "postTypeName": "book", "config": {}})

        assert provider.names() == []
        assert "book" not in host.registry

    def test_load_yaml(self, provider, tmp_path):
        path = tmp_path / "content_types.yml"
        path.write_text(
            "book:\n"
            "  autoload: true\n"
            "  config:\n"
            "    pluralName: Books\n"
            "movie:\n"
            "  config:\n"
            "    pluralName: Movies\n",
            encoding="utf-8",
        )

        assert provider.load(path) == ["book", "movie"]
        assert provider.instantiated() == ["book"]

    def test_flush_rewrite_rules_registers_everything(self, provider, host, book_config):
        provider.provide({"postTypeName": "book", "config": book_config})
        provider.provide({"postTypeName": "movie", "config": {"pluralName": "Movies"}})

        provider.flush_rewrite_rules()

        assert sorted(provider.instantiated()) == ["book", "movie"]
        assert host.get_content_types() == ["book", "movie"]
        assert host.registry.get("book").arguments["labels"]["name"] == "Books"
        assert host.rewrite_flush_count == 1

    def test_close_releases_definitions(self, provider, host, book_config):
        definition = provider.provide(
            {"autoload": True, "postTypeName": "book", "config": book_config}
        )

        provider.close()

        assert definition.is_closed
        assert provider.instantiated() == []
        assert "book" not in host.registry
        assert not host.hooks.has("init")

    def test_load_defaults_to_configured_path(self, provider, tmp_path, monkeypatch):
        path = tmp_path / "configured.yml"
        path.write_text(
            "movie:\n  autoload: true\n  config:\n    pluralName: Movies\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("CTH_CONTENT_TYPES_CONFIG", str(path))

        assert provider.load() == ["movie"]
        assert provider.instantiated() == ["movie"]

    def test_load_missing_configured_path(self, provider, tmp_path, monkeypatch):
        monkeypatch.setenv("CTH_CONTENT_TYPES_CONFIG", str(tmp_path / "absent.yml"))

        with pytest.raises(InvalidConfiguration):
            provider.load()
