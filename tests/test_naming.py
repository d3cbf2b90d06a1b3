"""
Property-based tests for snapshot naming.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from githubstars.naming import QueryIdentity, encode_snapshot_name

part_strategy = st.text(max_size=30)
safe_part_strategy = st.text(
    max_size=30,
    alphabet=st.characters(blacklist_characters="<>", blacklist_categories=("Cs",)),
)


@given(language=part_strategy, query=part_strategy, stars=part_strategy)
@settings(max_examples=100)
def test_encoding_is_deterministic(language: str, query: str, stars: str) -> None:
    """Equal query tuples always map to the same name."""
    first = encode_snapshot_name(language, query, stars)
    second = encode_snapshot_name(language, query, stars)

    assert first == second
    assert QueryIdentity(language, query, stars).snapshot_name == first


@given(language=safe_part_strategy, query=safe_part_strategy, stars=safe_part_strategy)
@settings(max_examples=100)
def test_names_without_operators_are_plain_concatenation(
    language: str, query: str, stars: str
) -> None:
    """Only comparison operators are escaped."""
    assert encode_snapshot_name(language, query, stars) == language + query + stars


@given(language=part_strategy, query=part_strategy, stars=part_strategy)
@settings(max_examples=100)
def test_at_most_one_operator_of_each_kind_is_escaped(
    language: str, query: str, stars: str
) -> None:
    """Exactly one '>' and one '<' disappear when present; the rest stay."""
    raw = language + query + stars
    name = encode_snapshot_name(language, query, stars)

    assert name.count(">") == max(0, raw.count(">") - 1)
    assert name.count("<") == max(0, raw.count("<") - 1)


def test_only_first_greater_than_is_escaped() -> None:
    assert encode_snapshot_name("", "", ">100>200") == "gr100>200"


def test_less_than_is_escaped() -> None:
    assert encode_snapshot_name("go", "", "<50") == "golo50"


def test_both_operators_escaped_once() -> None:
    assert encode_snapshot_name("", "", "<10>5<3") == "lo10gr5<3"


def test_parts_are_concatenated_in_order() -> None:
    assert encode_snapshot_name("go", "web", ">1000") == "gowebgr1000"


def test_empty_identity_maps_to_empty_name() -> None:
    assert encode_snapshot_name() == ""
    assert QueryIdentity().snapshot_name == ""


def test_search_query_includes_all_parts() -> None:
    identity = QueryIdentity(language="go", query="web framework", stars=">1000")

    assert identity.search_query == "web framework language:go stars:>1000"


def test_search_query_omits_empty_parts() -> None:
    assert QueryIdentity(language="rust").search_query == "language:rust"
    assert QueryIdentity(stars="10..20").search_query == "stars:10..20"
    assert QueryIdentity().search_query == ""
