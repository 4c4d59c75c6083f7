"""
Name table loading tests: packaged CSVs and directory overrides.
"""

import logging

from nameguess import NameParser
from nameguess.resources import open_csv_reader
from nameguess.services import DataInitializationService
from nameguess.types import NameParserConfig


def test_packaged_tables_load(parser):
    info = parser.get_table_info()

    assert info.male_names > 100
    assert info.female_names > 100
    assert info.diminutives > 50


def test_packaged_tables_do_not_overlap():
    data = DataInitializationService(NameParserConfig.create_default()).initialize_data_structures()
    assert not data.male_names & data.female_names


def test_full_given_names_are_not_diminutives():
    data = DataInitializationService(NameParserConfig.create_default()).initialize_data_structures()

    for name in ("michael", "charles", "john", "julia"):
        assert not data.is_known_diminutive(name), name
    assert data.is_known_diminutive("Mike")
    assert "michael" in data.diminutive_to_names["mike"]


def test_lookups_fold_case_and_reject_non_strings():
    data = DataInitializationService(NameParserConfig.create_default()).initialize_data_structures()

    assert data.is_known_male_name(" MICHAEL ")
    assert data.is_known_female_name("mary")
    assert not data.is_known_male_name(None)
    assert not data.is_known_diminutive(42)


def test_csv_reader_skips_comments():
    rows = list(open_csv_reader("first_names.csv"))
    assert rows
    assert set(rows[0]) == {"name", "gender"}
    assert not any(row["name"].startswith("#") for row in rows)


def test_tables_from_data_dir(tmp_path, caplog):
    (tmp_path / "first_names.csv").write_text("name,gender\nAlex,m\nSam,f\nKim,x\n", encoding="utf-8")
    (tmp_path / "diminutives.csv").write_text(
        "# nicknames\ndiminutive,name\nAl,alexander\nal,albert\nSammy,samantha\n",
        encoding="utf-8",
    )
    config = NameParserConfig.create_default().with_data_dir(tmp_path)

    with caplog.at_level(logging.WARNING, logger="nameguess"):
        data = DataInitializationService(config).initialize_data_structures()

    assert data.male_names == frozenset({"alex"})
    assert data.female_names == frozenset({"sam"})
    assert data.diminutive_to_names == {"al": ("alexander", "albert"), "sammy": ("samantha",)}
    assert "kim" in caplog.text

    parser = NameParser(config)
    info = parser.get_table_info()
    assert (info.male_names, info.female_names, info.diminutives) == (1, 1, 2)
    assert parser.guess("Samantha (Sammy) Jones").gender is None
    assert parser.guess("Sam (Sammy) Jones").gender == "f"
