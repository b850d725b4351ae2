"""Tests for the CREDITS alias table."""

from karmalog.aliases import AliasTable, build_alias_map, parse_records


class TestParseRecords:
    def test_skips_everything_before_delimiter(self, credits_text):
        records = parse_records(credits_text)
        usernames = [r.username for r in records if r.usable]
        assert usernames == ["coke", "jkeenan", "jnthn"]

    def test_no_delimiter_means_no_records(self):
        assert parse_records("N: Someone\nU: someone\n") == []

    def test_repeated_field_last_write_wins(self, credits_text):
        records = [r for r in parse_records(credits_text) if r.usable]
        assert records[-1].username == "jnthn"

    def test_aliases_split_and_unquoted(self, credits_text):
        coke = next(r for r in parse_records(credits_text) if r.username == "coke")
        assert coke.display_name == 'Will "Coke" Coleda'
        assert coke.aliases == ["wcoleda", "Will C"]

    def test_field_lines_need_uppercase_letter_and_colon_space(self):
        text = "----------\nu: lower\nUU: double\nU:nospace\nU: real\n"
        records = parse_records(text)
        assert [r.username for r in records if r.usable] == ["real"]


class TestBuildAliasMap:
    def test_trailing_comma_adds_no_empty_alias(self):
        table = AliasTable()
        table.parse("----------\nU: coke\nA: wcoleda, \n")
        assert "" not in table
        assert table.resolve("wcoleda") == "coke"
        assert table.render("") == "++"

    def test_record_without_username_contributes_nothing(self, credits_text):
        aliases = build_alias_map(parse_records(credits_text))
        assert "Nobody Special" not in aliases
        assert "ghost" not in aliases
        assert "Phantom User" not in aliases

    def test_display_name_and_aliases_map_to_username(self, credits_text):
        aliases = build_alias_map(parse_records(credits_text))
        assert aliases == {
            'Will "Coke" Coleda': "coke",
            "wcoleda": "coke",
            "Will C": "coke",
            "James E Keenan": "jkeenan",
            "Jonathan Worthington": "jnthn",
            "JW": "jnthn",
        }


class TestAliasTable:
    def test_parse_returns_count(self, credits_text):
        table = AliasTable()
        assert table.parse(credits_text) == 6
        assert len(table) == 6

    def test_resolve_aliases(self, aliases):
        assert aliases.resolve("wcoleda") == "coke"
        assert aliases.resolve("Will C") == "coke"

    def test_resolve_is_exact_match(self, aliases):
        assert aliases.resolve("WCOLEDA") == "WCOLEDA"
        assert aliases.resolve("wcoleda ") == "wcoleda "

    def test_unknown_identity_passes_through(self, aliases):
        assert aliases.resolve("someone") == "someone"

    def test_render_plain(self, aliases):
        assert aliases.render("wcoleda") == "coke++"

    def test_render_wraps_names_with_spaces(self, aliases):
        assert aliases.render("Foo Bar") == "(Foo Bar)++"

    def test_render_resolves_before_wrapping(self, aliases):
        assert aliases.render("James E Keenan") == "jkeenan++"

    def test_render_none(self, aliases):
        assert aliases.render(None) == "unknown++"

    def test_render_wraps_only_on_space(self, aliases):
        assert aliases.render("tab\tname") == "tab\tname++"

    def test_parse_replaces_whole_table(self, aliases):
        before = aliases.snapshot
        aliases.parse("----------\nU: other\nA: someone\n")
        assert aliases.resolve("wcoleda") == "wcoleda"
        assert aliases.resolve("someone") == "other"
        # old snapshot is left intact for any reader still holding it
        assert before["wcoleda"] == "coke"

    def test_logs_alias_count(self, credits_text, caplog):
        with caplog.at_level("INFO", logger="karmalog.aliases"):
            AliasTable().parse(credits_text)
        assert "6 aliases total" in caplog.text
