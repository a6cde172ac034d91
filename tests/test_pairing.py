"""
tests/test_pairing.py

Partner selection between courses.
"""
from pairing import optimize_course_pairs, predicted_leftover


def test_predicted_leftover():
    assert predicted_leftover(5, 3) == 1
    assert predicted_leftover(4, 4) == 0
    assert predicted_leftover(10, 5) == 2
    assert predicted_leftover(0, 0) == 0


def test_two_courses_pair_with_each_other():
    assert optimize_course_pairs([5, 3]) == [1, 0]


def test_partner_minimises_leftover_then_balance():
    # 5 ties with both 6 and 4 on leftover and balance, so the first one wins
    assert optimize_course_pairs([10, 6, 5, 4]) == [1, 2, 1, 2]


def test_full_tie_keeps_lowest_index():
    assert optimize_course_pairs([4, 4, 4]) == [1, 0, 0]


def test_pairing_is_not_a_matching():
    # several courses may prefer the same partner
    pairs = optimize_course_pairs([9, 8, 1])
    assert pairs[0] == 1
    assert pairs[2] == 1


def test_fewer_than_two_courses():
    assert optimize_course_pairs([7]) == [0]
    assert optimize_course_pairs([]) == [0]
