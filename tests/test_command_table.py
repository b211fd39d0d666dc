import pytest

from webdriver_wire.commands.catalog import ELEMENT_COMMANDS, SESSION_COMMANDS
from webdriver_wire.commands.table import CommandSpec, CommandTable, LookupStatus
from webdriver_wire.errors import ObsoleteCommand, UnknownCommand
from webdriver_wire.models import HttpVerb


def test_lookup_distinguishes_found_obsolete_and_missing() -> None:
    table = CommandTable({"url": ["GET", "POST"]}, obsolete={"speed": ["GET", "POST"]})

    found = table.lookup("url")
    assert found.status is LookupStatus.FOUND
    assert found.spec is not None
    assert found.spec.verbs == (HttpVerb.GET, HttpVerb.POST)

    obsolete = table.lookup("speed")
    assert obsolete.status is LookupStatus.OBSOLETE
    assert not obsolete.found

    missing = table.lookup("teleport")
    assert missing.status is LookupStatus.NOT_FOUND
    assert missing.spec is None


def test_default_verb_is_first_registered() -> None:
    table = CommandTable({"url": ["GET", "POST"], "forward": ["POST"], "buttondown": "POST"})

    assert table.default_verb("url") is HttpVerb.GET
    assert table.default_verb("forward") is HttpVerb.POST
    assert table.default_verb("buttondown") is HttpVerb.POST


def test_default_verb_raises_for_obsolete_and_unknown() -> None:
    table = CommandTable({"url": ["GET"]}, obsolete={"modifier": ["POST"]})

    with pytest.raises(ObsoleteCommand):
        table.default_verb("modifier")
    with pytest.raises(UnknownCommand):
        table.default_verb("nope")


def test_command_spec_requires_a_verb() -> None:
    with pytest.raises(ValueError):
        CommandSpec(name="empty", verbs=())
    with pytest.raises(ValueError):
        CommandSpec.build("bad", ["PATCH"])


def test_merged_tables_keep_both_sides() -> None:
    base = CommandTable({"element": ["POST"]})
    extra = CommandTable({"title": ["GET"]}, obsolete={"speed": ["GET"]})

    merged = base.merged(extra)

    assert "element" in merged
    assert "title" in merged
    assert len(merged) == 2
    assert merged.lookup("speed").status is LookupStatus.OBSOLETE
    assert "title" not in base


def test_catalog_tables() -> None:
    assert SESSION_COMMANDS.default_verb("cookie") is HttpVerb.GET
    assert "element" in SESSION_COMMANDS
    assert SESSION_COMMANDS.lookup("modifier").status is LookupStatus.OBSOLETE
    assert ELEMENT_COMMANDS.lookup("toggle").status is LookupStatus.OBSOLETE
    assert all(spec.verbs for spec in SESSION_COMMANDS)
