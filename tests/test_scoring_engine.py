import pytest

from lfm.match.scoring import (
    MatchConfidence,
    MatchScorer,
    ScoringConfig,
    confidence_for,
    evaluate_pair,
    format_match_score,
    is_valid_match,
    top_matches,
)
from lfm.models import ItemCategory


def test_scoring_keys_at_sports_field(make_lost, make_found):
    r = evaluate_pair(make_lost(), make_found())
    assert r.score == pytest.approx(0.20 + 0.35 * (0.7 + 0.3 * 5 / 8) + 0.20 + 0.10)
    assert r.confidence == MatchConfidence.HIGH
    assert r.reasons == (
        "Same category (keys)",
        "Item name similar (89%)",
        "Location nearby (100%)",
        "Reported within 1 day",
    )
    assert is_valid_match(r)


def test_scoring_unrelated_pair_rejected(make_lost, make_found):
    lost = make_lost(item_name='กระเป๋าสตางค์สีดำ', category=ItemCategory.WALLET, location_lost='โรงอาหาร')
    found = make_found(days=20, description='เอกสาร', location_found='ลานจอดรถ')
    r = evaluate_pair(lost, found)
    assert r.breakdown.found_category == ItemCategory.DOCUMENTS
    assert r.breakdown.category == 0.3
    assert r.score == pytest.approx(0.06)
    assert r.reasons == ()
    assert r.confidence == MatchConfidence.LOW
    assert not is_valid_match(r)


def test_category_mismatch_and_unknown(make_lost, make_found):
    scorer = MatchScorer()
    mismatch = scorer.score(make_lost(category=ItemCategory.PHONE), make_found())
    assert mismatch.breakdown.category == 0.3
    assert not any(reason.startswith("Same category") for reason in mismatch.reasons)

    unknown_lost = scorer.score(make_lost(category=None), make_found())
    assert unknown_lost.breakdown.category == 0.5

    unknown_found = scorer.score(make_lost(), make_found(description='something random'))
    assert unknown_found.breakdown.found_category is None
    assert unknown_found.breakdown.category == 0.5


def test_description_missing_contributes_nothing(make_lost, make_found):
    r = evaluate_pair(make_lost(description='สีแดง มีพวงกุญแจ'), make_found(description=''))
    assert r.breakdown.description == 0.0
    assert r.breakdown.item_name == 0.0
    assert not any(reason.startswith("Description") for reason in r.reasons)


def test_description_reason_and_color_bonus(make_lost, make_found):
    lost = make_lost(description='พวงกุญแจสีแดง')
    found = make_found(description='พวงกุญแจสีแดง มีป้ายชื่อ')
    r = evaluate_pair(lost, found)
    assert r.breakdown.description > 0.4
    assert any(reason.startswith("Description similar (") for reason in r.reasons)
    assert r.breakdown.color == 'แดง'
    assert r.reasons[-1] == "Color match (แดง)"
    assert r.breakdown.bonus == pytest.approx(0.05)


def test_brand_bonus_first_hit_only(make_lost, make_found):
    lost = make_lost(item_name='iPhone 13 Apple', category=ItemCategory.PHONE)
    found = make_found(description='apple iphone เคสใส')
    r = evaluate_pair(lost, found)
    brand_reasons = [reason for reason in r.reasons if reason.startswith("Brand match")]
    assert brand_reasons == ["Brand match (iphone)"]
    assert r.breakdown.brand == 'iphone'
    assert r.breakdown.bonus == pytest.approx(0.10)


def test_color_bonus_first_hit_only(make_lost, make_found):
    lost = make_lost(item_name='กระเป๋าสีดำ ขาว', category=ItemCategory.BAG)
    found = make_found(description='กระเป๋า ดำ ขาว')
    r = evaluate_pair(lost, found)
    color_reasons = [reason for reason in r.reasons if reason.startswith("Color match")]
    assert color_reasons == ["Color match (ดำ)"]
    assert r.breakdown.bonus == pytest.approx(0.05)


def test_score_clamped_to_one(make_lost, make_found):
    lost = make_lost(item_name='iphone สีดำ', category=ItemCategory.PHONE,
                     description='iphone สีดำ', location_lost='library')
    found = make_found(description='iphone สีดำ', location_found='library')
    r = evaluate_pair(lost, found)
    assert r.breakdown.bonus == pytest.approx(0.15)
    assert r.score == 1.0
    assert r.score_percentage == 100


def test_scores_bounded(make_lost, make_found):
    names = ['กุญแจ', 'iphone สีดำ', 'กระเป๋าสตางค์สีดำ', '']
    places = ['สนามกีฬา', 'library', 'โรงอาหาร', '']
    for name in names:
        for place in places:
            for days in (0, 5, 40):
                r = evaluate_pair(
                    make_lost(item_name=name, description=name, location_lost=place),
                    make_found(days=days, description='iphone สีดำ พวงกุญแจ', location_found='library'),
                )
                assert 0.0 <= r.score <= 1.0


@pytest.mark.parametrize("days,expected", [
    (0, 1.0), (1, 1.0), (2, 0.8), (3, 0.8), (5, 0.5), (7, 0.5),
    (10, 0.2), (14, 0.2), (15, 0.0), (100, 0.0),
])
def test_time_tiers(days, expected):
    assert MatchScorer().time_score(days) == expected


def test_time_score_monotonic():
    scorer = MatchScorer()
    values = [scorer.time_score(d / 2) for d in range(0, 60)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_time_reasons(make_lost, make_found):
    assert "Reported within 3 days" in evaluate_pair(make_lost(), make_found(days=2)).reasons
    assert "Reported within 7 days" in evaluate_pair(make_lost(), make_found(days=-6)).reasons
    far = evaluate_pair(make_lost(), make_found(days=10))
    assert not any(reason.startswith("Reported within") for reason in far.reasons)
    assert far.breakdown.time == 0.2


def test_time_tiers_from_config_are_sorted():
    cfg = ScoringConfig(time_tiers=[[2, 1.0], [1, 0.9]])
    assert cfg.time_tiers == ((1.0, 0.9), (2.0, 1.0))
    assert cfg.to_dict()['time_tiers'] == [[1.0, 0.9], [2.0, 1.0]]


@pytest.mark.parametrize("score,expected", [
    (1.0, MatchConfidence.HIGH),
    (0.70, MatchConfidence.HIGH),
    (0.6999, MatchConfidence.MEDIUM),
    (0.55, MatchConfidence.MEDIUM),
    (0.5499, MatchConfidence.LOW),
    (0.0, MatchConfidence.LOW),
])
def test_confidence_tiers(score, expected):
    assert confidence_for(score) == expected


def test_confidence_monotonic():
    rank = {MatchConfidence.LOW: 0, MatchConfidence.MEDIUM: 1, MatchConfidence.HIGH: 2}
    tiers = [rank[confidence_for(i / 100)] for i in range(101)]
    assert tiers == sorted(tiers)


def test_custom_accept_threshold(make_lost, make_found):
    cfg = ScoringConfig(min_accept_score=0.9)
    r = evaluate_pair(make_lost(), make_found(), cfg)
    assert r.score < 0.9
    assert not is_valid_match(r, cfg)
    assert is_valid_match(r)


def test_format_match_score_rounds_half_up():
    assert format_match_score(0.8125) == "81%"
    assert format_match_score(0.125) == "13%"
    assert format_match_score(1.0) == "100%"
    assert format_match_score(0.0) == "0%"


def test_top_matches(make_lost, make_found):
    results = [evaluate_pair(make_lost(), make_found(id=f"F{i}")) for i in range(7)]
    assert [r.found_item.id for r in top_matches(results)] == ["F0", "F1", "F2", "F3", "F4"]
    assert len(top_matches(results, 2)) == 2
    assert len(top_matches(results, 20)) == 7
    assert top_matches([], 3) == []


def test_match_result_to_dict(make_lost, make_found):
    r = evaluate_pair(make_lost(), make_found())
    data = r.to_dict()
    assert r.key == ('L1', 'F1')
    assert data['lostItem']['itemName'] == 'กุญแจ'
    assert data['foundItem']['locationFound'] == 'สนามกีฬา'
    assert data['scorePercentage'] == 81
    assert data['confidence'] == 'high'
    assert data['reasons'][0] == "Same category (keys)"
