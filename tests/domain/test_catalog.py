from __future__ import annotations

from sonarpick.domain.catalog import filter_entries, sort_entries
from sonarpick.domain.model import ProjectEntry, SortPolicy


def _keys(entries: tuple[ProjectEntry, ...]) -> list[str]:
    return [entry.key for entry in entries]


def test_filter_without_term_is_identity(catalog: tuple[ProjectEntry, ...]) -> None:
    assert filter_entries(catalog, "") == catalog
    assert filter_entries(catalog, None) == catalog


def test_filter_matches_key_case_insensitively(catalog: tuple[ProjectEntry, ...]) -> None:
    result = filter_entries(catalog, "AUDIT")

    assert _keys(result) == ["acme:ops:audit-svc:main", "zeta:ops:audit-svc:main"]


def test_filter_matches_name(catalog: tuple[ProjectEntry, ...]) -> None:
    result = filter_entries(catalog, "(develop)")

    assert _keys(result) == ["acme:pay:billing-api:develop"]


def test_filter_missing_name_never_matches() -> None:
    entries = (ProjectEntry(key="k1", name=None), ProjectEntry(key="k2", name="Service"))

    assert _keys(filter_entries(entries, "service")) == ["k2"]


def test_filter_preserves_input_order(catalog: tuple[ProjectEntry, ...]) -> None:
    result = filter_entries(catalog, "main")

    assert _keys(result) == [
        "acme:pay:billing-api:main",
        "acme:ops:audit-svc:main",
        "zeta:ops:audit-svc:main",
    ]


def test_filter_with_no_match_returns_empty(catalog: tuple[ProjectEntry, ...]) -> None:
    assert filter_entries(catalog, "nothing-like-this") == ()


def test_default_sort_keeps_order(catalog: tuple[ProjectEntry, ...]) -> None:
    assert sort_entries(catalog, SortPolicy.DEFAULT) == catalog


def test_component_branch_sort(catalog: tuple[ProjectEntry, ...]) -> None:
    result = sort_entries(catalog, SortPolicy.COMPONENT_BRANCH)

    assert _keys(result) == [
        "acme:ops:audit-svc:main",
        "zeta:ops:audit-svc:main",
        "acme:pay:billing-api:develop",
        "acme:pay:billing-api:main",
    ]


def test_component_branch_sort_is_stable_for_equal_keys() -> None:
    entries = (
        ProjectEntry(key="zeta:ops:svc:main"),
        ProjectEntry(key="acme:ops:svc:main"),
        ProjectEntry(key="mid:ops:svc:main"),
    )

    result = sort_entries(entries, SortPolicy.COMPONENT_BRANCH)

    assert _keys(result) == ["zeta:ops:svc:main", "acme:ops:svc:main", "mid:ops:svc:main"]


def test_group_component_branch_sort(catalog: tuple[ProjectEntry, ...]) -> None:
    result = sort_entries(catalog, SortPolicy.GROUP_COMPONENT_BRANCH)

    assert _keys(result) == [
        "acme:ops:audit-svc:main",
        "acme:pay:billing-api:develop",
        "acme:pay:billing-api:main",
        "zeta:ops:audit-svc:main",
    ]


def test_sort_accepts_policy_names() -> None:
    entries = (ProjectEntry(key="g:o:b:main"), ProjectEntry(key="g:o:a:main"))

    assert _keys(sort_entries(entries, "component_branch")) == ["g:o:a:main", "g:o:b:main"]


def test_sort_does_not_mutate_input(catalog: tuple[ProjectEntry, ...]) -> None:
    before = tuple(catalog)

    sort_entries(catalog, SortPolicy.GROUP_COMPONENT_BRANCH)

    assert catalog == before


def test_component_sort_ignores_case() -> None:
    entries = (
        ProjectEntry(key="g:o:Zeta:main"),
        ProjectEntry(key="g:o:alpha:main"),
        ProjectEntry(key="g:o:Beta:main"),
    )

    assert _keys(sort_entries(entries, SortPolicy.COMPONENT_BRANCH)) == [
        "g:o:alpha:main",
        "g:o:Beta:main",
        "g:o:Zeta:main",
    ]


def test_group_sort_ignores_case_across_segments() -> None:
    entries = (
        ProjectEntry(key="Web:o:api:main"),
        ProjectEntry(key="mobile:o:App:main"),
        ProjectEntry(key="mobile:o:api:Release"),
        ProjectEntry(key="mobile:o:api:develop"),
    )

    assert _keys(sort_entries(entries, SortPolicy.GROUP_COMPONENT_BRANCH)) == [
        "mobile:o:api:develop",
        "mobile:o:api:Release",
        "mobile:o:App:main",
        "Web:o:api:main",
    ]
