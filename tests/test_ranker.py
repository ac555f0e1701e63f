"""Tests for ranker.py — category filter, alignment scoring and ordering."""

from models import CATEGORIES, UserPreferences
from ranker import (
    alignment_score,
    filter_by_category,
    interest_matches,
    rank,
    rank_with_scores,
)


def _prefs(types=(), interests=()):
    return UserPreferences(opportunity_types=tuple(types), interests=tuple(interests))


# --- Category filter ---


def test_filter_keeps_selected_categories(make_opportunity):
    """Only opportunities whose category is selected survive."""
    catalog = [
        make_opportunity(id="1", category="job"),
        make_opportunity(id="2", category="internship"),
        make_opportunity(id="3", category="community"),
    ]
    result = filter_by_category(catalog, ["job", "community"])
    assert [o.id for o in result] == ["1", "3"]


def test_filter_empty_selection_keeps_all(make_opportunity):
    """No selected categories means no filtering, not an empty result."""
    catalog = [make_opportunity(id=str(i), category=c) for i, c in enumerate(CATEGORIES)]
    assert filter_by_category(catalog, []) == catalog


def test_filter_excludes_everything_when_nothing_matches(make_opportunity):
    catalog = [make_opportunity(category="job")]
    assert filter_by_category(catalog, ["extracurricular"]) == []


# --- Interest matching ---


def test_tag_contains_related_tag(make_opportunity):
    """Opportunity tag "technology" contains related tag "tech"."""
    opp = make_opportunity(tags=["Technology"])
    assert interest_matches(opp, "Technology") is True


def test_related_tag_contained_in_tag(make_opportunity):
    """Related tag "computer" is contained in opportunity tag "computer science"."""
    opp = make_opportunity(tags=["Computer Science"])
    assert interest_matches(opp, "Technology") is True


def test_tag_contained_in_related_tag(make_opportunity):
    """Opportunity tag "visual" is contained in related tag "visual arts"."""
    opp = make_opportunity(tags=["Visual"])
    assert interest_matches(opp, "Art") is True


def test_matching_is_case_insensitive(make_opportunity):
    opp = make_opportunity(tags=["ROBOTICS"])
    assert interest_matches(opp, "stem") is True
    assert interest_matches(opp, "STEM") is True


def test_no_match(make_opportunity):
    opp = make_opportunity(tags=["Music", "Orchestra"])
    assert interest_matches(opp, "Healthcare") is False


def test_no_tags_never_matches(make_opportunity):
    opp = make_opportunity(tags=[])
    assert interest_matches(opp, "STEM") is False


def test_unknown_interest_matches_itself(make_opportunity):
    """Interests missing from the table fall back to their own name."""
    opp = make_opportunity(tags=["Chess Club"])
    assert interest_matches(opp, "Chess") is True
    assert interest_matches(opp, "Knitting") is False


def test_short_related_tag_matches_inside_longer_word(make_opportunity):
    """Substring matching is fuzzy: STEM's "ai" is found inside "painting"."""
    opp = make_opportunity(tags=["Painting"])
    assert interest_matches(opp, "STEM") is True


def test_custom_tag_map(make_opportunity):
    """The lookup table is a parameter, not a hidden global."""
    opp = make_opportunity(tags=["Chess"])
    tag_map = {"strategy": ("chess", "go")}
    assert interest_matches(opp, "Strategy", tag_map) is True
    assert interest_matches(opp, "Strategy") is False


# --- Alignment score ---


def test_score_no_interests_is_zero(make_opportunity):
    opp = make_opportunity(tags=["Technology"])
    assert alignment_score(opp, []) == 0.0


def test_score_is_fraction_of_matched_interests(make_opportunity):
    """Interests [STEM, Art] with tags ["art"] → only Art matches → 0.5."""
    opp = make_opportunity(tags=["art"])
    assert alignment_score(opp, ["STEM", "Art"]) == 0.5


def test_score_counts_each_interest_once(make_opportunity):
    """Several tags satisfying one interest still contribute 1."""
    opp = make_opportunity(tags=["Software", "Coding", "Computer Science", "Tech"])
    assert alignment_score(opp, ["Technology"]) == 1.0


def test_score_m_over_k(make_opportunity):
    opp = make_opportunity(tags=["Music", "Tutoring"])
    score = alignment_score(opp, ["Music", "Education", "Healthcare", "Sports"])
    assert score == 2 / 4


def test_score_always_in_unit_interval(make_opportunity):
    opps = [
        make_opportunity(tags=[]),
        make_opportunity(tags=["Art", "Music", "Science", "Volunteer"]),
        make_opportunity(tags=["unrelated"]),
    ]
    interests = ["STEM", "Art", "Music", "Community Service", "Theater"]
    for opp in opps:
        assert 0.0 <= alignment_score(opp, interests) <= 1.0


# --- rank ---


def test_scenario_technology_job_first(make_opportunity):
    """Technology-tagged job ranks ahead of the art job."""
    tech = make_opportunity(id="tech", category="job", tags=["technology", "remote"])
    art = make_opportunity(id="art", category="job", tags=["art"])
    result = rank_with_scores([art, tech], _prefs(["job"], ["Technology"]))
    assert [(o.id, s) for o, s in result] == [("tech", 1.0), ("art", 0.0)]


def test_rank_filters_then_sorts(make_opportunity):
    catalog = [
        make_opportunity(id="1", category="job", tags=["Art"]),
        make_opportunity(id="2", category="community", tags=["Software"]),
        make_opportunity(id="3", category="job", tags=["Coding"]),
    ]
    result = rank(catalog, _prefs(["job"], ["Technology"]))
    assert [o.id for o in result] == ["3", "1"]


def test_rank_no_interests_keeps_catalog_order(make_opportunity):
    catalog = [
        make_opportunity(id="1", category="job", tags=["Art"]),
        make_opportunity(id="2", category="internship", tags=["Coding"]),
        make_opportunity(id="3", category="job", tags=["Software"]),
    ]
    result = rank(catalog, _prefs(["job", "internship"], []))
    assert [o.id for o in result] == ["1", "2", "3"]


def test_rank_ties_keep_catalog_order(make_opportunity):
    """Stable sort: equal scores stay in input order."""
    catalog = [
        make_opportunity(id="1", tags=["Art"]),
        make_opportunity(id="2", tags=["Coding"]),
        make_opportunity(id="3", tags=["Gallery"]),
        make_opportunity(id="4", tags=["Software"]),
    ]
    result = rank(catalog, _prefs(["internship"], ["Technology"]))
    assert [o.id for o in result] == ["2", "4", "1", "3"]


def test_rank_no_types_reorders_whole_catalog(make_opportunity):
    """Empty opportunity types skip the filter but still sort by score."""
    catalog = [
        make_opportunity(id="1", category="community", tags=["Volunteer"]),
        make_opportunity(id="2", category="job", tags=["Coding"]),
    ]
    result = rank(catalog, _prefs([], ["Technology"]))
    assert [o.id for o in result] == ["2", "1"]


def test_rank_empty_catalog():
    assert rank([], _prefs(["job"], ["STEM"])) == []


def test_rank_never_includes_excluded_category(make_opportunity):
    catalog = [
        make_opportunity(id=str(i), category=CATEGORIES[i % 4], tags=["Coding"])
        for i in range(12)
    ]
    result = rank(catalog, _prefs(["community", "job"], ["STEM"]))
    assert len(result) == 6
    assert all(o.category in ("community", "job") for o in result)


def test_rank_is_subset_permutation(make_opportunity):
    catalog = [make_opportunity(id=str(i), tags=[t]) for i, t in enumerate(["Art", "Coding", "Drama"])]
    result = rank(catalog, _prefs([], ["Theater", "STEM"]))
    assert sorted(o.id for o in result) == ["0", "1", "2"]


def test_rank_is_repeatable(make_opportunity):
    """Same inputs, same output; inputs are not mutated."""
    catalog = [
        make_opportunity(id="1", tags=["Art"]),
        make_opportunity(id="2", tags=["Coding"]),
    ]
    snapshot = list(catalog)
    prefs = _prefs(["internship"], ["Technology", "Art"])
    assert rank(catalog, prefs) == rank(catalog, prefs)
    assert catalog == snapshot
