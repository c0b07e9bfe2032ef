import io

import pytest

from labkit.wiki import (
    WikiEntry,
    format_results,
    insert_entry,
    insert_raw,
    intersect,
    parse_title,
    read_entries,
    search,
    search_all,
)

HOGWARTS = "13576300:156567:Hogwarts School Of Witchcraft And Wizardry"

SAMPLE = [
    HOGWARTS,
    "13576300:156542:The Arrival (The Twilight Zone)",
    "13576300:156544:Cian Ciaran",
    "13576300:156545:B-sides",
    "13576300:156546:Stepin Fetchit",
    "13576300:156547:Remix",
    "13576300:156548:Gruff Rhys",
    "13576300:156549:Gruff Remix",
]

SORT_PAIRS = [
    ("43658487", "166067"),
    ("300907853", "277592"),
    ("66679025", "172583"),
    ("233152987", "242099"),
    ("207724733", "231119"),
    ("89800554", "180741"),
    ("247065992", "249093"),
    ("231701098", "241714"),
    ("212578740", "233342"),
    ("240699153", "246147"),
    ("265443003", "257621"),
    ("133429249", "198058"),
    ("123929477", "245107"),
    ("348311637", "305183"),
    ("203161898", "229147"),
    ("123929477", "194323"),
    ("239980909", "245795"),
    ("43658487", "232817"),
    ("354602575", "308096"),
    ("182331940", "218844"),
    ("265443003", "257654"),
]


@pytest.fixture
def entries():
    index = {}
    for raw in SAMPLE:
        insert_raw(index, raw)
    return index


def test_from_raw_splits_fields():
    entry = WikiEntry.from_raw(HOGWARTS)
    assert entry.namespace == "13576300"
    assert entry.page_id == "156567"
    assert entry.title == "Hogwarts School Of Witchcraft And Wizardry"


def test_from_raw_rejects_short_data():
    with pytest.raises(ValueError):
        WikiEntry.from_raw("13576300:156567")


def test_parse_title_of_raw_and_bare_title():
    assert parse_title(HOGWARTS) == "Hogwarts School Of Witchcraft And Wizardry"
    assert parse_title("Gruff Rhys") == "Gruff Rhys"


def test_equality_uses_namespace_and_id():
    assert WikiEntry("a", "1", "2") == WikiEntry("b", "1", "2")
    assert not WikiEntry("a", "1", "2") == WikiEntry("a", "1", "3")


def test_ordering_is_numeric():
    assert WikiEntry("t", "9", "1") < WikiEntry("t", "10", "1")
    assert WikiEntry("t", "10", "1") < WikiEntry("t", "10", "2")


def test_sort_spike_order():
    ordered = sorted(WikiEntry("title", ns, pid) for ns, pid in SORT_PAIRS)
    assert (ordered[0].namespace, ordered[0].page_id) == ("43658487", "166067")
    assert (ordered[1].namespace, ordered[1].page_id) == ("43658487", "232817")
    assert (ordered[-1].namespace, ordered[-1].page_id) == ("354602575", "308096")
    keys = [entry.sort_key() for entry in ordered]
    assert all(a <= b for a, b in zip(keys, keys[1:]))


def test_sort_key_rejects_non_numbers():
    with pytest.raises(ValueError):
        WikiEntry("t", "abc", "1").sort_key()


def test_describe():
    entry = WikiEntry.from_raw("13576300:156547:Remix")
    assert entry.describe() == "Title: Remix\nNamespace: 13576300\nID: 156547"


def test_insert_keeps_first_and_lowercases_key():
    index = {}
    assert insert_entry(index, "Remix", "13576300", "156547") is True
    assert insert_entry(index, "REMIX", "13576300", "999") is False
    assert list(index) == ["remix"]
    assert index["remix"].page_id == "156547"
    assert index["remix"].title == "Remix"


def test_search_is_case_insensitive_and_descending(entries):
    results = search(entries, "REMIX")
    assert [entry.title for entry in results] == ["remix", "gruff remix"]
    assert [entry.page_id for entry in results] == ["156547", "156549"]


def test_search_without_match(entries):
    assert search(entries, "zzz") == []


def test_search_all_intersects_terms(entries):
    results = search_all(entries, ["gruff", "remix"])
    assert [entry.page_id for entry in results] == ["156549"]


def test_search_all_three_terms(entries):
    results = search_all(entries, ["the", "twilight", "zone"])
    assert [entry.page_id for entry in results] == ["156542"]


def test_search_all_single_term_matches_search(entries):
    assert search_all(entries, ["gruff"]) == search(entries, "gruff")


def test_search_all_needs_terms(entries):
    with pytest.raises(ValueError):
        search_all(entries, [])


def test_intersect_is_subset_of_both():
    first = [WikiEntry("a", "1", "1"), WikiEntry("b", "1", "2"), WikiEntry("c", "2", "1")]
    second = [WikiEntry("x", "2", "1"), WikiEntry("y", "1", "1")]
    result = intersect(first, second)
    assert [entry.title for entry in result] == ["a", "c"]
    assert all(entry in second for entry in result)


def test_intersect_with_empty():
    assert intersect([WikiEntry("a", "1", "1")], []) == []


def test_read_entries():
    data = io.StringIO("0:156547:Remix\n0:156548:Gruff Rhys\n")
    index = read_entries(data)
    assert sorted(index) == ["gruff rhys", "remix"]
    assert index["gruff rhys"].namespace == "0"


def test_read_entries_rejects_short_rows():
    with pytest.raises(ValueError):
        read_entries(io.StringIO("0:156547\n"))


def test_format_results_empty():
    assert format_results([]) == "\nNo results found\n\n"


def test_format_results_aligns_columns(entries):
    text = format_results(search(entries, "r"))
    assert text.startswith("\nSearch Results:\n------------------\n")
    rows = text.strip("\n").splitlines()[2:]
    assert len(rows) == len(search(entries, "r"))
    assert len({row.index("[NS] ") for row in rows}) == 1
    assert len({row.index("[ID] ") for row in rows}) == 1