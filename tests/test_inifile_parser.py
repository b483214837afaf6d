"""Tests unitaires pour les parseurs INI."""

from unittest.mock import MagicMock

import pytest

from ini_python_utils.inifile import (
    IniDocument,
    LegacyIniParser,
    StandardIniParser,
    parse,
    serialize,
)


SERVER_INI = (
    "[server]\n"
    "host=localhost\n"
    "port=8080 # default\n"
    "[server]\n"
    "timeout=30\n"
)


class TestLegacyParserLines:
    """Tests du découpage en lignes logiques."""

    def test_comment_truncates_value(self):
        """Teste que ';' coupe la ligne et que le reste est perdu."""
        doc = parse("key=value ; trailing")
        assert doc.read_string("", "key") == "value"
        assert doc.section_entries("") == {"key": "value"}

    def test_hash_comment_truncates_value(self):
        """Teste que '#' se comporte comme ';'."""
        doc = parse("[a]\nkey=value# note\n")
        assert doc.section_entries("a") == {"key": "value"}

    def test_text_after_comment_is_parsed_as_new_line(self):
        """Teste que le texte après '#' devient une ligne à part entière."""
        doc = parse("[a]\nurl=http://host#frag=1\n")
        assert doc.section_entries("a") == {
            "url": "http://host",
            "frag": "1",
        }

    def test_header_after_comment_opens_section(self):
        """Teste qu'un en-tête placé après ';' ouvre bien une section."""
        doc = parse("[a]\nx=1 ;[b]\ny=2\n")
        assert doc.to_dict() == {"a": {"x": "1"}, "b": {"y": "2"}}

    def test_crlf_input(self):
        """Teste la lecture d'un fichier aux fins de ligne CRLF."""
        doc = parse("[a]\r\nk=v\r\n")
        assert doc.to_dict() == {"a": {"k": "v"}}

    def test_unterminated_last_line_is_kept(self):
        """Teste que la dernière ligne sans fin de ligne est parsée."""
        doc = parse("[a]\nk=v")
        assert doc.read_string("a", "k") == "v"

    def test_whitespace_is_trimmed(self):
        """Teste le nettoyage des espaces autour des noms et valeurs."""
        doc = parse("  [ sec ]  \n  key  =  some value  \n")
        assert doc.to_dict() == {"sec": {"key": "some value"}}


class TestLegacyParserPairs:
    """Tests des paires clé=valeur."""

    def test_multiple_equals_keeps_second_segment(self):
        """Teste que 'a=b=c' donne a -> 'b'."""
        doc = parse("a=b=c")
        assert doc.read_string("", "a") == "b"

    def test_empty_value(self):
        """Teste qu'une clé sans valeur stocke la chaîne vide."""
        doc = parse("[a]\nkey=\n")
        assert doc.read_string("a", "key") == ""

    def test_double_equals_gives_empty_value(self):
        """Teste que 'a==b' donne une valeur vide."""
        doc = parse("[s]\na==b\n")
        assert doc.read_string("s", "a") == ""

    @pytest.mark.parametrize("line", ["junk", "=value", "=", "   "])
    def test_invalid_lines_are_ignored(self, line):
        """Teste que les lignes invalides sont ignorées sans erreur."""
        doc = parse(f"[a]\n{line}\nk=v\n")
        assert doc.to_dict() == {"a": {"k": "v"}}

    def test_repeated_key_overwrites(self):
        """Teste que la dernière occurrence d'une clé l'emporte."""
        doc = parse("[a]\nk=1\nk=2\n")
        assert doc.read_string("a", "k") == "2"


class TestLegacyParserSections:
    """Tests des en-têtes de section."""

    def test_end_to_end_repeated_header_merges(self):
        """Teste la fusion d'une section rouverte."""
        doc = parse(SERVER_INI)
        assert list(doc.sections()) == ["server"]
        assert doc.section_entries("server") == {
            "host": "localhost",
            "port": "8080",
            "timeout": "30",
        }

    def test_reopened_section_overwrites_keys(self):
        """Teste l'écrasement des clés d'une section rouverte."""
        doc = parse("[a]\nk=1\nx=0\n[b]\ny=2\n[a]\nk=3\n")
        assert list(doc.sections()) == ["a", "b"]
        assert doc.section_entries("a") == {"k": "3", "x": "0"}

    def test_keys_before_first_header_are_dropped(self):
        """Teste que les clés sans section sont perdues s'il y a un en-tête."""
        doc = parse("orphan=1\n[a]\nx=1\n")
        assert doc.to_dict() == {"a": {"x": "1"}}

    def test_no_header_keeps_unnamed_section(self):
        """Teste qu'un fichier sans en-tête donne la section ''."""
        doc = parse("x=1\ny=2\n")
        assert doc.to_dict() == {"": {"x": "1", "y": "2"}}

    def test_empty_input_gives_empty_unnamed_section(self):
        """Teste qu'un texte vide donne une section '' vide."""
        assert parse("").to_dict() == {"": {}}

    def test_bracket_characters_are_removed_from_name(self):
        """Teste que tous les crochets sont retirés du nom de section."""
        assert list(parse("[foo]bar]\nk=v\n").sections()) == ["foobar"]
        assert list(parse("[[a]]\nk=v\n").sections()) == ["a"]

    def test_empty_header_mid_file_drops_following_keys(self):
        """Teste qu'une section '[]' suivie d'un en-tête est perdue."""
        doc = parse("[a]\nx=1\n[]\ny=2\n[b]\nz=3\n")
        assert doc.to_dict() == {"a": {"x": "1"}, "b": {"z": "3"}}

    def test_empty_header_at_end_is_committed(self):
        """Teste que la dernière section est enregistrée même sans nom."""
        doc = parse("[a]\nx=1\n[]\n")
        assert doc.to_dict() == {"a": {"x": "1"}, "": {}}

    def test_unclosed_header_is_ignored(self):
        """Teste qu'un en-tête non fermé est ignoré."""
        doc = parse("[a]\n[b\nk=v\n")
        assert doc.to_dict() == {"a": {"k": "v"}}

    def test_header_without_keys(self):
        """Teste qu'une section sans clé est conservée."""
        doc = parse("[a]\n[b]\nk=v\n")
        assert doc.to_dict() == {"a": {}, "b": {"k": "v"}}


class TestRoundTrip:
    """Tests de la cohérence parse/serialize."""

    def test_parse_serialize_round_trip(self):
        """Teste que parse(serialize(doc)) redonne le même document."""
        doc = IniDocument({
            "server": {"host": "localhost", "port": "8080"},
            "db": {"name": "main", "user": ""},
            "empty": {},
        })
        result = parse(serialize(doc))
        assert result == doc
        assert list(result.sections()) == ["server", "db", "empty"]
        assert list(result.section_entries("server")) == ["host", "port"]


class TestStandardIniParser:
    """Tests pour StandardIniParser."""

    def setup_method(self):
        """Instancie le parseur avant chaque test."""
        self.parser = StandardIniParser()

    def test_split_on_first_equals(self):
        """Teste que 'a=b=c' donne a -> 'b=c'."""
        doc = self.parser.parse("[s]\na=b=c\n")
        assert doc.read_string("s", "a") == "b=c"

    def test_header_strips_first_and_last_character(self):
        """Teste que seuls les crochets extrêmes sont retirés."""
        doc = self.parser.parse("[foo]bar]\nk=v\n")
        assert list(doc.sections()) == ["foo]bar"]

    def test_comments_still_truncate(self):
        """Teste que les commentaires restent supprimés."""
        doc = self.parser.parse("[s]\nk=v ; note\n")
        assert doc.section_entries("s") == {"k": "v"}

    def test_repeated_header_merges(self):
        """Teste la fusion d'une section rouverte."""
        doc = self.parser.parse(SERVER_INI)
        assert doc.section_entries("server") == {
            "host": "localhost",
            "port": "8080",
            "timeout": "30",
        }


class TestParserLogging:
    """Tests du logging des parseurs."""

    def test_logs_summary(self):
        """Teste le résumé de parsing envoyé au logger."""
        logger = MagicMock()
        LegacyIniParser(logger).parse("[a]\njunk\nk=v\n")
        logger.log_debug.assert_called_once_with(
            "Parsing INI terminé : 1 section(s), 1 ligne(s) ignorée(s)"
        )

    def test_without_logger(self):
        """Teste le parsing sans logger."""
        doc = LegacyIniParser().parse("[a]\nk=v\n")
        assert doc.read_string("a", "k") == "v"
