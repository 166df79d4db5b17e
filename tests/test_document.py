"""Tests unitaires pour le modèle IniDocument."""

import pytest

from cfgini.errors import (
    KeyMissingError,
    ProtectedSectionError,
    SectionMissingError,
)
from cfgini.ini import DEFAULT_SECTION, IniDocument, new, parse_string


@pytest.fixture
def doc():
    """Document avec une section par défaut et une section nommée."""
    document = new()
    document.default_section_set_key("age", "18")
    document.section_set_key("first", "firstk", "firstv")
    return document


class TestNew:
    """Tests pour la création d'un document."""

    def test_default_section_present(self):
        """Un document neuf contient la section par défaut, vide."""
        document = new()
        assert document.sections() == [DEFAULT_SECTION]
        assert document.default_section_get() == {}

    def test_new_returns_independent_documents(self):
        """Deux documents neufs ne partagent pas leur stockage."""
        a, b = new(), new()
        a.default_section_set_key("k", "v")
        assert b.default_section_get() == {}


class TestAccessors:
    """Tests pour les accès en lecture."""

    def test_section_get(self, doc):
        assert doc.section_get("first") == {"firstk": "firstv"}

    def test_section_get_missing(self, doc):
        with pytest.raises(SectionMissingError):
            doc.section_get("LOL")

    def test_section_get_returns_copy(self, doc):
        """Modifier le résultat ne modifie pas le document."""
        pairs = doc.section_get("first")
        pairs["other"] = "x"
        assert doc.section_get("first") == {"firstk": "firstv"}

    def test_section_get_key(self, doc):
        assert doc.section_get_key("first", "firstk") == "firstv"

    def test_section_get_key_missing_section(self, doc):
        with pytest.raises(SectionMissingError):
            doc.section_get_key("LOL", "year")

    def test_section_get_key_missing_key(self, doc):
        with pytest.raises(KeyMissingError):
            doc.section_get_key("first", "nope")

    def test_default_section_get_key(self, doc):
        assert doc.default_section_get_key("age") == "18"

    def test_failed_lookup_does_not_create_section(self, doc):
        """Une recherche ratée ne crée pas la section."""
        with pytest.raises(SectionMissingError):
            doc.section_get_key("ghost", "k")
        assert "ghost" not in doc
        assert doc.sections() == [DEFAULT_SECTION, "first"]


class TestSetKey:
    """Tests pour section_set_key."""

    def test_set_then_get(self, doc):
        doc.section_set_key("first", "firstk", "changed")
        assert doc.section_get_key("first", "firstk") == "changed"

    def test_set_creates_section(self, doc):
        doc.section_set_key("new", "k", "v")
        assert doc.section_get("new") == {"k": "v"}

    def test_default_section_set_key(self):
        document = new()
        document.default_section_set_key("k", "v")
        assert document.section_get_key(DEFAULT_SECTION, "k") == "v"


class TestDelKey:
    """Tests pour section_del_key."""

    def test_del_existing_key(self, doc):
        doc.section_del_key("first", "firstk")
        assert doc.section_get("first") == {}

    def test_del_absent_key_is_noop(self, doc):
        doc.section_del_key("first", "absent")
        assert doc.section_get("first") == {"firstk": "firstv"}

    def test_del_key_missing_section(self, doc):
        with pytest.raises(SectionMissingError):
            doc.section_del_key("LOL", "year")

    def test_default_section_del_key(self, doc):
        doc.default_section_del_key("age")
        assert doc.default_section_get() == {}


class TestSectionDel:
    """Tests pour section_del."""

    def test_del_section(self, doc):
        doc.section_del("first")
        assert not doc.has_section("first")

    def test_del_missing_section(self, doc):
        with pytest.raises(SectionMissingError):
            doc.section_del("LOL")

    @pytest.mark.parametrize("document", [new(), parse_string("a = b\n[s]\nk = v")])
    def test_default_section_is_protected(self, document):
        """La section par défaut ne peut jamais être supprimée."""
        with pytest.raises(ProtectedSectionError):
            document.section_del(DEFAULT_SECTION)
        assert DEFAULT_SECTION in document


class TestSectionUpdate:
    """Tests pour section_update."""

    def test_update_scenario_lol(self):
        """La section LOL devient accessible après mise à jour."""
        document = new()
        with pytest.raises(SectionMissingError):
            document.section_get_key("LOL", "year")

        document.section_update("LOL", {"year": "2018"})
        assert document.section_get_key("LOL", "year") == "2018"

    def test_update_new_section_is_exactly_data(self):
        document = new()
        document.section_update("s", {"a": "1", "b": "2"})
        assert document.section_get("s") == {"a": "1", "b": "2"}

    def test_update_existing_section_is_union(self, doc):
        doc.section_set_key("first", "keep", "me")
        doc.section_update("first", {"firstk": "new", "added": "x"})
        assert doc.section_get("first") == {
            "firstk": "new",
            "keep": "me",
            "added": "x",
        }


class TestHelpers:
    """Tests pour les utilitaires du document."""

    def test_equality(self, doc):
        other = IniDocument()
        other.section_update("first", {"firstk": "firstv"})
        other.default_section_set_key("age", "18")
        assert doc == other

    def test_inequality(self, doc):
        assert doc != new()

    def test_to_dict_is_deep_copy(self, doc):
        data = doc.to_dict()
        data["first"]["firstk"] = "x"
        assert doc.section_get_key("first", "firstk") == "firstv"
        assert data[DEFAULT_SECTION] == {"age": "18"}

    def test_len_and_contains(self, doc):
        assert len(doc) == 2
        assert "first" in doc
        assert "second" not in doc
