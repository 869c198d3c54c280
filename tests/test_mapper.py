import pytest

from dicerng.config import Config
from dicerng.mapper import die_from_word, draw_die, is_valid_pair

CFG = Config()


def test_thresholds():
    assert CFG.FAIR_LIMIT % 6 == 0
    assert CFG.FAIR_LIMIT <= 2 ** 32 < CFG.FAIR_LIMIT + 6
    assert CFG.FAIR_QUOTIENT * 6 == CFG.FAIR_LIMIT


def test_face_boundaries():
    q = CFG.FAIR_QUOTIENT
    assert die_from_word(0) == 1
    assert die_from_word(q - 1) == 1
    assert die_from_word(q) == 2
    assert die_from_word(5 * q) == 6
    assert die_from_word(CFG.FAIR_LIMIT - 1) == 6


def test_die_from_word_rejects_unfair_values():
    with pytest.raises(ValueError):
        die_from_word(CFG.FAIR_LIMIT)


def test_draw_die_redraws_values_at_or_above_limit():
    words = iter([0xFFFFFFFF, CFG.FAIR_LIMIT, CFG.FAIR_LIMIT + 3, 2 * CFG.FAIR_QUOTIENT])
    drawn = []

    def next_word():
        w = next(words)
        drawn.append(w)
        return w

    assert draw_die(next_word) == 3
    assert len(drawn) == 4


def test_each_face_gets_same_number_of_raw_values():
    q = CFG.FAIR_QUOTIENT
    for face in range(1, 7):
        lo, hi = (face - 1) * q, face * q - 1
        assert die_from_word(lo) == face
        assert die_from_word(hi) == face


def test_is_valid_pair():
    assert is_valid_pair((1, 6))
    assert not is_valid_pair((0, 0))
    assert not is_valid_pair((3, 7))
    assert not is_valid_pair((-1, 2))
