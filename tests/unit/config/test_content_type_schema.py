"""Unit tests for the content type configuration schema."""

import pytest
from pydantic import ValidationError

from content_type_hub.config.schema import ContentTypeConfig, ProviderEntry, RenderDescriptor


@pytest.mark.unit
class TestContentTypeConfig:
    def test_camel_case_aliases(self):
        config = ContentTypeConfig.model_validate(
            {
                "pluralName": "Books",
                "singularName": "Book",
                "addFeed": True,
                "sortableColumns": ["isbn"],
            }
        )

        assert config.plural_name == "Books"
        assert config.singular_name == "Book"
        assert config.add_feed is True
        assert config.sortable_columns == ["isbn"]

    def test_field_names_accepted(self):
        config = ContentTypeConfig.model_validate({"plural_name": "Books", "add_feed": True})

        assert config.plural_name == "Books"
        assert config.add_feed is True

    def test_defaults(self):
        config = ContentTypeConfig.model_validate({"pluralName": "Books"})

        assert config.args == {}
        assert config.additional_supports is None
        assert config.columns_filter is None
        assert config.columns_data is None
        assert config.sortable_columns is None
        assert config.sort_columns_by is None
        assert config.add_feed is False

    def test_additional_supports_list_becomes_mapping(self):
        config = ContentTypeConfig.model_validate({"additionalSupports": ["thumbnail", "excerpt"]})

        assert config.additional_supports == {"thumbnail": True, "excerpt": True}

    def test_additional_supports_mapping_kept(self):
        config = ContentTypeConfig.model_validate(
            {"additionalSupports": {"thumbnail": True, "comments": False}}
        )

        assert config.additional_supports == {"thumbnail": True, "comments": False}

    def test_sortable_columns_mapping_keys(self):
        config = ContentTypeConfig.model_validate(
            {"sortableColumns": {"isbn": "meta_isbn", "author": "author"}}
        )

        assert config.sortable_columns == ["isbn", "author"]

    @pytest.mark.parametrize("value", ["yes", 1, "true", None])
    def test_add_feed_only_literal_true(self, value):
        config = ContentTypeConfig.model_validate({"addFeed": value})

        assert config.add_feed is False

    def test_columns_filter_keeps_order_and_types(self):
        config = ContentTypeConfig.model_validate(
            {"columnsFilter": {"cb": True, "title": "Title", "date": "Date"}}
        )

        assert list(config.columns_filter.items()) == [
            ("cb", True),
            ("title", "Title"),
            ("date", "Date"),
        ]

    def test_columns_data_descriptor_defaults(self):
        config = ContentTypeConfig.model_validate({"columnsData": {"isbn": {"callback": "x.y"}}})

        descriptor = config.columns_data["isbn"]
        assert descriptor.echo is True
        assert descriptor.args == []
        assert descriptor.has_callback

    def test_columns_data_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            ContentTypeConfig.model_validate({"columnsData": {"isbn": "x.y"}})

    def test_labels_configured_flag(self):
        assert ContentTypeConfig.model_validate({"args": {"labels": {}}}).labels_configured
        assert not ContentTypeConfig.model_validate({"args": {}}).labels_configured

    def test_is_hierarchical(self):
        assert ContentTypeConfig.model_validate({"args": {"hierarchical": True}}).is_hierarchical
        assert not ContentTypeConfig.model_validate({"pluralName": "Books"}).is_hierarchical

    def test_unknown_sections_are_kept(self):
        config = ContentTypeConfig.model_validate({"pluralName": "Books", "menuPosition": 5})

        assert config.model_extra == {"menuPosition": 5}


@pytest.mark.unit
class TestRenderDescriptor:
    def test_scalar_args_wrapped(self):
        assert RenderDescriptor.model_validate({"args": "x"}).args == ["x"]

    def test_tuple_args_listed(self):
        assert RenderDescriptor.model_validate({"args": ("a", "b")}).args == ["a", "b"]

    def test_missing_callback(self):
        assert not RenderDescriptor.model_validate({}).has_callback


@pytest.mark.unit
class TestProviderEntry:
    def test_defaults(self):
        entry = ProviderEntry()

        assert entry.model_dump(by_alias=True) == {
            "autoload": False,
            "postTypeName": "",
            "config": {},
            "enablePermalinkHandlers": False,
            "permalinkHandlers": {},
        }

    def test_aliases(self):
        entry = ProviderEntry.model_validate(
            {"autoload": True, "postTypeName": "foo", "config": {"pluralName": "Foos"}}
        )

        assert entry.autoload is True
        assert entry.post_type_name == "foo"
        assert entry.config == {"pluralName": "Foos"}

    def test_null_config_becomes_empty(self):
        assert ProviderEntry.model_validate({"config": None}).config == {}
