"""Unit tests for loading provider entries from YAML."""

import pytest

from content_type_hub.config.loader import load_content_type_entries
from content_type_hub.domain.content_types import InvalidConfiguration


@pytest.fixture
def write_yaml(tmp_path):
    def _write(content: str, name: str = "content_types.yml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.mark.unit
class TestLoadContentTypeEntries:
    def test_mapping_form_uses_key_as_name(self, write_yaml):
        path = write_yaml(
            """
book:
  autoload: true
  config:
    pluralName: Books
    singularName: Book
movie:
  config:
    pluralName: Movies
"""
        )

        entries = load_content_type_entries(path)

        assert [e.post_type_name for e in entries] == ["book", "movie"]
        assert entries[0].autoload is True
        assert entries[1].autoload is False
        assert entries[0].config["singularName"] == "Book"

    def test_list_form(self, write_yaml):
        path = write_yaml(
            """
- autoload: true
  postTypeName: foo
  config:
    args:
      public: true
      hierarchical: false
    pluralName: Foos
    singularName: Foo
"""
        )

        entries = load_content_type_entries(str(path))

        assert len(entries) == 1
        assert entries[0].post_type_name == "foo"
        assert entries[0].config["args"] == {"public": True, "hierarchical": False}

    def test_explicit_name_wins_in_mapping_form(self, write_yaml):
        path = write_yaml("book:\n  postTypeName: novel\n")

        assert load_content_type_entries(path)[0].post_type_name == "novel"

    def test_empty_file_has_no_entries(self, write_yaml):
        assert load_content_type_entries(write_yaml("")) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidConfiguration) as exc_info:
            load_content_type_entries(tmp_path / "missing.yml")

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, write_yaml):
        path = write_yaml("book: [unclosed\n")

        with pytest.raises(InvalidConfiguration) as exc_info:
            load_content_type_entries(path)

        assert "Invalid YAML" in str(exc_info.value)

    def test_scalar_document_rejected(self, write_yaml):
        with pytest.raises(InvalidConfiguration):
            load_content_type_entries(write_yaml("just a string\n"))

    def test_invalid_entry_rejected(self, write_yaml):
        path = write_yaml("book:\n  config: not-a-mapping\n")

        with pytest.raises(InvalidConfiguration) as exc_info:
            load_content_type_entries(path)

        assert "validation failed" in str(exc_info.value)
